"""Exception taxonomy for hashauth."""

from __future__ import annotations

from typing import Any, Dict, Optional


class HashAuthError(Exception):
    """Base exception for all token and key material failures."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class MalformedTokenError(HashAuthError):
    """Token does not split into a data and a signature segment."""


class InvalidSignatureError(HashAuthError):
    """Signature segment does not match the data segment."""


class InvalidTokenDataError(HashAuthError):
    """Data segment could not be decoded, decrypted or deserialized."""


class ClaimNotFoundError(HashAuthError):
    """A claim carried by the token is absent from the request data."""

    def __init__(self, claim: str) -> None:
        self.claim = claim
        super().__init__(
            f"the {claim} claim does not exist in request data",
            details={"claim": claim},
        )


class UnknownClaimError(HashAuthError):
    """No validator is registered for a claim carried by the token."""

    def __init__(self, claim: str) -> None:
        self.claim = claim
        super().__init__(
            f"no validator registered for claim {claim!r}",
            details={"claim": claim},
        )


class ClaimValidationError(HashAuthError):
    """A claim validator rejected the request value."""

    def __init__(self, claim: str, expected: Any, actual: Any, reason: str = "") -> None:
        self.claim = claim
        self.expected = expected
        self.actual = actual
        message = f"claim {claim!r} rejected"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, details={"claim": claim, "reason": reason})


class KeyMaterialError(HashAuthError):
    """Key or IV has the wrong shape for the configured algorithm."""


class UnsupportedAlgorithmError(HashAuthError):
    """Cipher algorithm identifier is not supported."""

    def __init__(self, algorithm: str) -> None:
        self.algorithm = algorithm
        super().__init__(
            f"unsupported cipher algorithm: {algorithm}",
            details={"algorithm": algorithm},
        )


__all__ = [
    "HashAuthError",
    "MalformedTokenError",
    "InvalidSignatureError",
    "InvalidTokenDataError",
    "ClaimNotFoundError",
    "UnknownClaimError",
    "ClaimValidationError",
    "KeyMaterialError",
    "UnsupportedAlgorithmError",
]
