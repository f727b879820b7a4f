import pytest

from hashauth.keys import StaticKeyStorage

SIGNATURE_KEY = "signing-secret"
TOKEN_KEY = "0123456789abcdef0123456789abcdef"
TOKEN_IV = "abcdef9876543210"


@pytest.fixture
def key_storage() -> StaticKeyStorage:
    return StaticKeyStorage(
        signature_key=SIGNATURE_KEY,
        algorithm="aes-256-cbc",
        token_key=TOKEN_KEY,
        token_iv=TOKEN_IV,
    )


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "hashauth.yaml"
    path.write_text(
        f"""
keys:
  signature_key: {SIGNATURE_KEY}
  algorithm: aes-256-cbc
  token_key: {TOKEN_KEY}
  token_iv: {TOKEN_IV}
claims:
  missing: ignore
"""
    )
    return path
