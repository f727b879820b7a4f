"""Explicit mapping of claim names to validators."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from .base import Claim

logger = logging.getLogger(__name__)


class ClaimRegistry:
    """Resolves claim validators by name.

    The registry is handed to the parser at construction; nothing is looked
    up implicitly by class name.
    """

    def __init__(self, claims: Optional[Iterable[Claim]] = None) -> None:
        self._claims: Dict[str, Claim] = {}
        for claim in claims or ():
            self.register(claim.name, claim)

    def register(self, name: str, claim: Claim) -> None:
        """Bind ``claim`` to ``name``, replacing any existing binding."""
        if not name:
            raise ValueError("claim name must not be empty")
        if name in self._claims:
            logger.debug("Replacing validator for claim %s", name)
        self._claims[name] = claim

    def unregister(self, name: str) -> None:
        self._claims.pop(name, None)

    def get(self, name: str) -> Optional[Claim]:
        return self._claims.get(name)

    def names(self) -> List[str]:
        return sorted(self._claims)

    def __contains__(self, name: object) -> bool:
        return name in self._claims

    def __len__(self) -> int:
        return len(self._claims)
