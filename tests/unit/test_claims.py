"""Tests for built-in claim validators and the registry."""

import pytest

from hashauth.claims import (
    Claim,
    ClaimRegistry,
    EqualsClaim,
    ExpClaim,
    IpClaim,
    RoleClaim,
    UserAgentClaim,
    default_registry,
)
from hashauth.errors import ClaimValidationError


def test_role_claim_accepts_overlap() -> None:
    claim = RoleClaim()
    claim.check("admin", "admin")
    claim.check(["admin", "editor"], "editor")
    claim.check("admin", ["user", "admin"])


def test_role_claim_rejects_mismatch() -> None:
    with pytest.raises(ClaimValidationError) as exc_info:
        RoleClaim().check("admin", "user")
    assert exc_info.value.claim == "role"
    assert exc_info.value.expected == "admin"
    assert exc_info.value.actual == "user"


def test_role_claim_rejects_structured_values() -> None:
    with pytest.raises(ClaimValidationError):
        RoleClaim().check("admin", [{"name": "admin"}])
    with pytest.raises(ClaimValidationError):
        RoleClaim().check([{"name": "admin"}], "admin")
    RoleClaim().check([{"name": "admin"}], [{"name": "admin"}])


def test_ip_claim_matches_addresses_and_networks() -> None:
    claim = IpClaim()
    claim.check("10.0.0.1", "10.0.0.1")
    claim.check("10.0.0.0/24", "10.0.0.42")
    claim.check(["192.168.1.0/24", "::1"], "::1")
    with pytest.raises(ClaimValidationError):
        claim.check("10.0.0.0/24", "10.0.1.1")
    with pytest.raises(ClaimValidationError):
        claim.check("10.0.0.0/24", "not-an-ip")
    with pytest.raises(ClaimValidationError):
        claim.check("bogus", "10.0.0.1")


def test_user_agent_claim_requires_equality() -> None:
    UserAgentClaim().check("curl/8.0", "curl/8.0")
    with pytest.raises(ClaimValidationError):
        UserAgentClaim().check("curl/8.0", "curl/8.1")


def test_exp_claim() -> None:
    claim = ExpClaim()
    claim.check(1000, 999)
    with pytest.raises(ClaimValidationError):
        claim.check(1000, 1000)
    with pytest.raises(ClaimValidationError):
        claim.check("never", 1)


def test_default_registry_contents() -> None:
    registry = default_registry()
    assert registry.names() == ["exp", "ip", "role", "user_agent"]
    assert isinstance(registry.get("role"), RoleClaim)
    assert registry.get("tenant") is None
    assert default_registry() is not registry


def test_registry_register_and_unregister() -> None:
    class TenantClaim(Claim):
        name = "tenant"

        def check(self, expected, actual):
            if expected != actual:
                raise ClaimValidationError(self.name, expected, actual)

    registry = ClaimRegistry([TenantClaim()])
    assert "tenant" in registry
    registry.register("plan", EqualsClaim("plan"))
    assert len(registry) == 2
    registry.unregister("tenant")
    assert "tenant" not in registry
    with pytest.raises(ValueError):
        registry.register("", EqualsClaim(""))
