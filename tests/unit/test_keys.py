"""Tests for key material providers."""

import base64

import pytest

from hashauth.config import KeyConfig
from hashauth.errors import KeyMaterialError
from hashauth.keys import KeyStorage, StaticKeyStorage


def test_static_storage_encodes_text_keys() -> None:
    storage = StaticKeyStorage("sig", "AES-256-CBC", "k" * 32, "i" * 16)
    assert isinstance(storage, KeyStorage)
    assert storage.get_signature_key() == b"sig"
    assert storage.get_algorithm() == "aes-256-cbc"
    assert storage.get_token_key() == b"k" * 32
    assert storage.get_token_iv() == b"i" * 16


def test_static_storage_from_config_hex_and_base64() -> None:
    key = bytes(range(32))
    iv = bytes(range(16))
    hex_storage = StaticKeyStorage.from_config(
        KeyConfig(
            signature_key="00ff",
            token_key=key.hex(),
            token_iv=iv.hex(),
            encoding="hex",
        )
    )
    assert hex_storage.get_signature_key() == b"\x00\xff"
    assert hex_storage.get_token_key() == key

    b64_storage = StaticKeyStorage.from_config(
        KeyConfig(
            signature_key=base64.b64encode(b"sig").decode(),
            token_key=base64.b64encode(key).decode(),
            token_iv=base64.b64encode(iv).decode(),
            encoding="base64",
        )
    )
    assert b64_storage.get_token_iv() == iv


def test_static_storage_rejects_bad_material() -> None:
    with pytest.raises(KeyMaterialError):
        StaticKeyStorage("", "aes-256-cbc", "k" * 32, "i" * 16)
    with pytest.raises(KeyMaterialError):
        StaticKeyStorage("sig", "aes-256-cbc", "zz", "i" * 16, encoding="hex")


def test_repr_hides_key_material() -> None:
    storage = StaticKeyStorage("top-secret", "aes-256-cbc", "k" * 32, "i" * 16)
    assert "top-secret" not in repr(storage)
