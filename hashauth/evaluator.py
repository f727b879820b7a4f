"""Evaluation of token claims against request data."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .claims import ClaimRegistry, default_registry
from .config import MissingClaimPolicy
from .errors import ClaimNotFoundError, UnknownClaimError

logger = logging.getLogger(__name__)


class EvaluationResult(BaseModel):
    """Outcome of a successful claim evaluation."""

    model_config = ConfigDict(frozen=True)

    checked: Tuple[str, ...] = Field(default=(), description="Claims a validator accepted")
    skipped: Tuple[str, ...] = Field(default=(), description="Claims absent from the request data")


class ClaimEvaluator:
    """Runs each token claim through its registered validator.

    Claims carried by the token drive evaluation; request data entries the
    token does not mention are never inspected. A claim absent from the
    request data is skipped under the ``ignore`` policy and raises
    :class:`ClaimNotFoundError` under ``reject``. Validator errors propagate
    unchanged and stop evaluation at the first failure.
    """

    def __init__(
        self,
        registry: Optional[ClaimRegistry] = None,
        missing_claims: MissingClaimPolicy = "ignore",
    ) -> None:
        if missing_claims not in ("ignore", "reject"):
            raise ValueError(f"Unsupported missing claim policy: {missing_claims}")
        self.registry = registry if registry is not None else default_registry()
        self.missing_claims = missing_claims

    def evaluate(
        self, claims: Mapping[str, Any], request_data: Mapping[str, Any]
    ) -> EvaluationResult:
        checked: List[str] = []
        skipped: List[str] = []
        for name, expected in claims.items():
            if name not in request_data:
                if self.missing_claims == "reject":
                    raise ClaimNotFoundError(name)
                logger.warning("Claim %s not present in request data, skipping", name)
                skipped.append(name)
                continue

            validator = self.registry.get(name)
            if validator is None:
                raise UnknownClaimError(name)
            validator.check(expected, request_data[name])
            logger.debug("Claim %s accepted", name)
            checked.append(name)
        return EvaluationResult(checked=tuple(checked), skipped=tuple(skipped))
