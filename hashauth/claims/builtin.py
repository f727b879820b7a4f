"""Built-in claim validators."""

from __future__ import annotations

import ipaddress
from typing import Any, Iterable, List

from ..errors import ClaimValidationError
from .base import Claim


def _as_list(value: Any) -> List[Any]:
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]


class EqualsClaim(Claim):
    """Accepts when the request value equals the expected value."""

    def __init__(self, name: str) -> None:
        self.name = name

    def check(self, expected: Any, actual: Any) -> None:
        if expected != actual:
            raise ClaimValidationError(self.name, expected, actual, "value mismatch")


class RoleClaim(Claim):
    """Accepts when any of the request roles is one of the expected roles."""

    name = "role"

    def check(self, expected: Any, actual: Any) -> None:
        allowed = _as_list(expected)
        if not any(role in allowed for role in _as_list(actual)):
            raise ClaimValidationError(self.name, expected, actual, "role not permitted")


class IpClaim(Claim):
    """Accepts when the request address falls inside an expected address or network."""

    name = "ip"

    def check(self, expected: Any, actual: Any) -> None:
        try:
            address = ipaddress.ip_address(str(actual))
        except ValueError as exc:
            raise ClaimValidationError(
                self.name, expected, actual, "request address is not an IP address"
            ) from exc
        if not any(address in network for network in self._networks(expected)):
            raise ClaimValidationError(self.name, expected, actual, "address not permitted")

    def _networks(self, expected: Any) -> Iterable[ipaddress.IPv4Network | ipaddress.IPv6Network]:
        for item in _as_list(expected):
            try:
                yield ipaddress.ip_network(str(item), strict=False)
            except ValueError as exc:
                raise ClaimValidationError(
                    self.name, expected, None, f"token carries an invalid network: {item}"
                ) from exc


class UserAgentClaim(EqualsClaim):
    def __init__(self) -> None:
        super().__init__("user_agent")


class ExpClaim(Claim):
    """Rejects once the request timestamp reaches the expiry the token carries."""

    name = "exp"

    def check(self, expected: Any, actual: Any) -> None:
        try:
            expires_at = float(expected)
            now = float(actual)
        except (TypeError, ValueError) as exc:
            raise ClaimValidationError(
                self.name, expected, actual, "timestamps must be numeric"
            ) from exc
        if now >= expires_at:
            raise ClaimValidationError(self.name, expected, actual, "token expired")


BUILTIN_CLAIMS: List[Claim] = [RoleClaim(), IpClaim(), UserAgentClaim(), ExpClaim()]
