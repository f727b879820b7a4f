"""Token payload models."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class TokenPayload(BaseModel):
    """Decrypted body of a token: opaque ``data`` plus expected claim values.

    ``claims`` is exposed as a read-only mapping.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    data: Any = Field(..., description="Opaque payload returned to the caller")
    claims: Mapping[str, Any] = Field(..., description="Claim name to expected value")

    @field_validator("claims", mode="after")
    @classmethod
    def _freeze_claims(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @field_serializer("claims")
    def _dump_claims(self, value: Mapping[str, Any]) -> Dict[str, Any]:
        return dict(value)

    def to_json(self) -> str:
        """Serialize payload to compact JSON."""
        return self.model_dump_json()

    @classmethod
    def from_json(cls, data: bytes | str) -> "TokenPayload":
        """Deserialize payload from JSON."""
        return cls.model_validate_json(data)
