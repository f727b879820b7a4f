"""Token issuance."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .cipher import encrypt_payload
from .config import HashAuthConfig
from .keys import KeyStorage, StaticKeyStorage
from .parser import DELIMITER
from .signature import Signature

logger = logging.getLogger(__name__)


class TokenGenerator:
    """Issue tokens readable by a :class:`~hashauth.parser.TokenParser` sharing its keys."""

    def __init__(self, key_storage: KeyStorage) -> None:
        self.key_storage = key_storage

    @classmethod
    def from_config(cls, config: HashAuthConfig) -> "TokenGenerator":
        return cls(StaticKeyStorage.from_config(config.keys))

    def generate(self, data: Any, claims: Optional[Mapping[str, Any]] = None) -> str:
        """Encrypt ``data`` with ``claims`` and return the signed token."""
        data_segment = encrypt_payload(
            data,
            claims or {},
            self.key_storage.get_algorithm(),
            self.key_storage.get_token_key(),
            self.key_storage.get_token_iv(),
        )
        signature = Signature(data_segment, self.key_storage.get_signature_key()).generate()
        logger.debug("Issued token with claims %s", sorted(claims or {}))
        return f"{data_segment}{DELIMITER}{signature}"
