"""Claim validators and the registry that binds them to claim names."""

from __future__ import annotations

from .base import Claim
from .builtin import (
    BUILTIN_CLAIMS,
    EqualsClaim,
    ExpClaim,
    IpClaim,
    RoleClaim,
    UserAgentClaim,
)
from .registry import ClaimRegistry


def default_registry() -> ClaimRegistry:
    """Return a fresh registry holding the built-in validators."""

    return ClaimRegistry(BUILTIN_CLAIMS)


__all__ = [
    "Claim",
    "ClaimRegistry",
    "EqualsClaim",
    "ExpClaim",
    "IpClaim",
    "RoleClaim",
    "UserAgentClaim",
    "default_registry",
]
