"""Token parsing: structural split, signature check, decryption and claims."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Tuple

from .cipher import decrypt_payload
from .claims import ClaimRegistry
from .config import HashAuthConfig, MissingClaimPolicy
from .errors import HashAuthError, InvalidSignatureError, MalformedTokenError
from .evaluator import ClaimEvaluator
from .keys import KeyStorage, StaticKeyStorage
from .signature import Signature

logger = logging.getLogger(__name__)

DELIMITER = "-"


def split_token(token: str) -> Tuple[str, str]:
    """Split ``token`` into its data and signature segments.

    Only the first two fields are significant; anything after a second
    delimiter is ignored.
    """

    if not isinstance(token, str):
        raise MalformedTokenError("invalid token", details={"reason": "not a string"})
    if not token.isascii():
        raise MalformedTokenError("invalid token", details={"reason": "non-ascii characters"})
    fields = token.split(DELIMITER)
    if len(fields) < 2:
        raise MalformedTokenError("invalid token", details={"reason": "missing delimiter"})
    data_segment, signature_segment = fields[0], fields[1]
    if not data_segment or not signature_segment:
        raise MalformedTokenError("invalid token", details={"reason": "empty segment"})
    return data_segment, signature_segment


class TokenParser:
    """Verifies tokens and returns the data they carry.

    Each call runs split, signature verification, decryption and claim
    evaluation in that order; the first failing stage raises and nothing
    after it runs.
    """

    def __init__(
        self,
        key_storage: KeyStorage,
        registry: Optional[ClaimRegistry] = None,
        missing_claims: MissingClaimPolicy = "ignore",
    ) -> None:
        self.key_storage = key_storage
        self.evaluator = ClaimEvaluator(registry, missing_claims=missing_claims)
        self._request_data: Dict[str, Any] = {}

    @classmethod
    def from_config(
        cls, config: HashAuthConfig, registry: Optional[ClaimRegistry] = None
    ) -> "TokenParser":
        return cls(
            StaticKeyStorage.from_config(config.keys),
            registry=registry,
            missing_claims=config.claims.missing,
        )

    def get_request_data(self) -> Dict[str, Any]:
        return dict(self._request_data)

    def set_request_data(self, request_data: Mapping[str, Any]) -> "TokenParser":
        """Set default request data used when ``parse`` gets none."""
        self._request_data = dict(request_data)
        return self

    def parse(self, token: str, request_data: Optional[Mapping[str, Any]] = None) -> Any:
        """Verify ``token`` against ``request_data`` and return its ``data``.

        ``request_data`` falls back to whatever :meth:`set_request_data` stored.
        Passing it explicitly keeps concurrent calls on one parser independent.
        """

        try:
            data_segment = self.validate(token)
            return self.parse_token(data_segment, request_data)
        except HashAuthError as exc:
            logger.warning("Rejected token: %s", exc.message)
            raise

    def validate(self, token: str) -> str:
        """Check token shape and signature, returning the data segment."""
        data_segment, signature_segment = split_token(token)
        self._check_signature(data_segment, signature_segment)
        return data_segment

    def parse_token(
        self, data_segment: str, request_data: Optional[Mapping[str, Any]] = None
    ) -> Any:
        """Decrypt an already validated data segment and evaluate its claims."""
        payload = decrypt_payload(
            data_segment,
            self.key_storage.get_algorithm(),
            self.key_storage.get_token_key(),
            self.key_storage.get_token_iv(),
        )
        context = self._request_data if request_data is None else request_data
        result = self.evaluator.evaluate(payload.claims, context)
        logger.info(
            "Token accepted (checked=%s, skipped=%s)", result.checked, result.skipped
        )
        return payload.data

    def _check_signature(self, data_segment: str, signature_segment: str) -> None:
        signature = Signature(data_segment, self.key_storage.get_signature_key())
        if not signature.generate().is_valid(signature_segment):
            raise InvalidSignatureError("invalid token signature")
