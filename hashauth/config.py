from __future__ import annotations

import os
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field

MissingClaimPolicy = Literal["ignore", "reject"]


class KeyConfig(BaseModel):
    """Key material used to sign and encrypt tokens."""

    signature_key: str = ""
    algorithm: str = "aes-256-cbc"
    token_key: str = ""
    token_iv: str = ""
    encoding: Literal["utf-8", "hex", "base64"] = "utf-8"


class ClaimsConfig(BaseModel):
    """Claim evaluation settings."""

    missing: MissingClaimPolicy = "ignore"


class HashAuthConfig(BaseModel):
    """Top-level configuration model."""

    keys: KeyConfig = Field(default_factory=KeyConfig)
    claims: ClaimsConfig = Field(default_factory=ClaimsConfig)


_KEY_ENV_OVERRIDES = {
    "signature_key": "HASHAUTH_SIGNATURE_KEY",
    "algorithm": "HASHAUTH_ALGORITHM",
    "token_key": "HASHAUTH_TOKEN_KEY",
    "token_iv": "HASHAUTH_TOKEN_IV",
}


def load_config(path: Optional[str] = None) -> HashAuthConfig:
    """Load configuration from YAML file.

    Args:
        path: Optional path to config file. Falls back to HASHAUTH_CONFIG env
            variable or 'hashauth.yaml' in the current directory.
    """

    config_path = path or os.getenv("HASHAUTH_CONFIG", "hashauth.yaml")
    if os.path.exists(config_path):
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        config = HashAuthConfig(**data)
    else:
        config = HashAuthConfig()

    for field, env_name in _KEY_ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            setattr(config.keys, field, value)

    missing = os.getenv("HASHAUTH_MISSING_CLAIMS")
    if missing:
        config.claims = ClaimsConfig(missing=missing.lower())
    return config
