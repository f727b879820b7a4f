"""Keyed signatures over token data segments."""

from __future__ import annotations

import hmac
from hashlib import sha256


class Signature:
    """HMAC-SHA256 signature of a data segment, rendered as lowercase hex."""

    def __init__(self, data: str, key: bytes) -> None:
        self.data = data
        self._key = key
        self._digest: str | None = None

    def generate(self) -> "Signature":
        self._digest = hmac.new(self._key, self.data.encode("utf-8"), sha256).hexdigest()
        return self

    @property
    def digest(self) -> str:
        if self._digest is None:
            self.generate()
        return self._digest  # type: ignore[return-value]

    def is_valid(self, signature: str) -> bool:
        """Return ``True`` when ``signature`` exactly matches the computed digest."""
        if not signature.isascii():
            return False
        return hmac.compare_digest(self.digest.encode("ascii"), signature.encode("ascii"))

    def __str__(self) -> str:
        return self.digest


def sign(data: str, key: bytes) -> str:
    return Signature(data, key).digest


def verify_signature(data: str, signature: str, key: bytes) -> bool:
    return Signature(data, key).is_valid(signature)
