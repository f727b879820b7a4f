"""Symmetric encryption of token payloads.

Algorithm identifiers follow OpenSSL naming (``aes-256-cbc`` and friends) so
key material shared with other token issuers can be reused unchanged. CBC
modes use PKCS7 padding, CTR modes are unpadded stream modes.
"""

from __future__ import annotations

import base64
import binascii
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from pydantic import ValidationError

from .errors import InvalidTokenDataError, KeyMaterialError, UnsupportedAlgorithmError
from .models import TokenPayload

logger = logging.getLogger(__name__)

IV_SIZE = 16


@dataclass(frozen=True)
class CipherSpec:
    name: str
    key_size: int
    mode: Callable[[bytes], modes.Mode]
    padded: bool


SUPPORTED_ALGORITHMS: Dict[str, CipherSpec] = {
    f"aes-{bits}-{mode_name}": CipherSpec(
        name=f"aes-{bits}-{mode_name}",
        key_size=bits // 8,
        mode=mode,
        padded=padded,
    )
    for bits in (128, 192, 256)
    for mode_name, mode, padded in (
        ("cbc", modes.CBC, True),
        ("ctr", modes.CTR, False),
    )
}


def get_cipher_spec(algorithm: str) -> CipherSpec:
    spec = SUPPORTED_ALGORITHMS.get(algorithm.lower())
    if spec is None:
        raise UnsupportedAlgorithmError(algorithm)
    return spec


def _build_cipher(algorithm: str, key: bytes, iv: bytes) -> tuple[Cipher, CipherSpec]:
    spec = get_cipher_spec(algorithm)
    if len(key) != spec.key_size:
        raise KeyMaterialError(
            f"{spec.name} requires a {spec.key_size}-byte key, got {len(key)} bytes"
        )
    if len(iv) != IV_SIZE:
        raise KeyMaterialError(f"{spec.name} requires a {IV_SIZE}-byte IV, got {len(iv)} bytes")
    return Cipher(algorithms.AES(key), spec.mode(iv)), spec


def encrypt_bytes(plaintext: bytes, algorithm: str, key: bytes, iv: bytes) -> bytes:
    cipher, spec = _build_cipher(algorithm, key, iv)
    if spec.padded:
        padder = padding.PKCS7(algorithms.AES.block_size).padder()
        plaintext = padder.update(plaintext) + padder.finalize()
    encryptor = cipher.encryptor()
    return encryptor.update(plaintext) + encryptor.finalize()


def decrypt_bytes(ciphertext: bytes, algorithm: str, key: bytes, iv: bytes) -> bytes:
    """Decrypt ``ciphertext``; padding errors surface as ``InvalidTokenDataError``."""
    cipher, spec = _build_cipher(algorithm, key, iv)
    decryptor = cipher.decryptor()
    try:
        plaintext = decryptor.update(ciphertext) + decryptor.finalize()
        if spec.padded:
            unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
            plaintext = unpadder.update(plaintext) + unpadder.finalize()
    except ValueError as exc:
        raise InvalidTokenDataError("invalid token data", details={"stage": "decrypt"}) from exc
    return plaintext


def encrypt_payload(
    data: Any, claims: Mapping[str, Any], algorithm: str, key: bytes, iv: bytes
) -> str:
    """Encrypt ``data`` and ``claims`` into a base64 data segment."""
    payload = TokenPayload(data=data, claims=dict(claims))
    ciphertext = encrypt_bytes(payload.to_json().encode("utf-8"), algorithm, key, iv)
    return base64.b64encode(ciphertext).decode("ascii")


def decrypt_payload(segment: str, algorithm: str, key: bytes, iv: bytes) -> TokenPayload:
    """Decode, decrypt and deserialize a data segment.

    Raises:
        InvalidTokenDataError: the segment is not base64, does not decrypt, or
            does not hold a JSON object with ``data`` and ``claims`` fields.
    """
    try:
        ciphertext = base64.b64decode(segment, validate=True)
    except (ValueError, binascii.Error) as exc:
        raise InvalidTokenDataError("invalid token data", details={"stage": "decode"}) from exc
    if not ciphertext:
        raise InvalidTokenDataError("invalid token data", details={"stage": "decode"})

    plaintext = decrypt_bytes(ciphertext, algorithm, key, iv)
    try:
        payload = TokenPayload.from_json(plaintext.decode("utf-8"))
    except (UnicodeDecodeError, ValidationError) as exc:
        raise InvalidTokenDataError(
            "invalid token data", details={"stage": "deserialize"}
        ) from exc
    logger.debug("Decrypted payload with %d claim(s)", len(payload.claims))
    return payload
