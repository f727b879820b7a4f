"""Key material providers for signing and encrypting tokens."""

from __future__ import annotations

import abc
import base64
import binascii
from typing import Union

from .config import KeyConfig
from .errors import KeyMaterialError

KeyInput = Union[str, bytes]


class KeyStorage(metaclass=abc.ABCMeta):
    """Supplies the key material consumed by the parser and generator.

    Implementations only hand out material; they are never mutated by
    token processing.
    """

    @abc.abstractmethod
    def get_signature_key(self) -> bytes:
        """Return the key used to sign data segments."""
        raise NotImplementedError

    @abc.abstractmethod
    def get_algorithm(self) -> str:
        """Return the cipher algorithm identifier, e.g. ``aes-256-cbc``."""
        raise NotImplementedError

    @abc.abstractmethod
    def get_token_key(self) -> bytes:
        """Return the symmetric key used to encrypt payloads."""
        raise NotImplementedError

    @abc.abstractmethod
    def get_token_iv(self) -> bytes:
        """Return the initialization vector used to encrypt payloads."""
        raise NotImplementedError


def _to_bytes(value: KeyInput, encoding: str, name: str) -> bytes:
    if isinstance(value, bytes):
        return value
    try:
        if encoding == "hex":
            return bytes.fromhex(value)
        if encoding == "base64":
            return base64.b64decode(value, validate=True)
    except (ValueError, binascii.Error) as exc:
        raise KeyMaterialError(f"{name} is not valid {encoding}") from exc
    return value.encode("utf-8")


class StaticKeyStorage(KeyStorage):
    """Holds fixed key material in memory."""

    def __init__(
        self,
        signature_key: KeyInput,
        algorithm: str,
        token_key: KeyInput,
        token_iv: KeyInput,
        *,
        encoding: str = "utf-8",
    ) -> None:
        self._signature_key = _to_bytes(signature_key, encoding, "signature_key")
        self._algorithm = algorithm.lower()
        self._token_key = _to_bytes(token_key, encoding, "token_key")
        self._token_iv = _to_bytes(token_iv, encoding, "token_iv")
        if not self._signature_key:
            raise KeyMaterialError("signature_key must not be empty")

    @classmethod
    def from_config(cls, config: KeyConfig) -> "StaticKeyStorage":
        return cls(
            signature_key=config.signature_key,
            algorithm=config.algorithm,
            token_key=config.token_key,
            token_iv=config.token_iv,
            encoding=config.encoding,
        )

    def get_signature_key(self) -> bytes:
        return self._signature_key

    def get_algorithm(self) -> str:
        return self._algorithm

    def get_token_key(self) -> bytes:
        return self._token_key

    def get_token_iv(self) -> bytes:
        return self._token_iv

    def __repr__(self) -> str:
        return f"StaticKeyStorage(algorithm={self._algorithm!r})"
