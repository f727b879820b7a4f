"""Claim validator interface."""

from __future__ import annotations

import abc
from typing import Any


class Claim(metaclass=abc.ABCMeta):
    """Checks a request value against the value a token expects.

    Implementations accept by returning and reject by raising
    :class:`~hashauth.errors.ClaimValidationError` (or any other exception,
    which aborts parsing unchanged).
    """

    name: str = ""

    @abc.abstractmethod
    def check(self, expected: Any, actual: Any) -> None:
        """Validate ``actual`` request data against ``expected`` token data."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
