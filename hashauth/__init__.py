"""hashauth: compact encrypted bearer tokens with declarative claims."""

from .claims import Claim, ClaimRegistry, default_registry
from .config import HashAuthConfig, load_config
from .errors import (
    ClaimNotFoundError,
    ClaimValidationError,
    HashAuthError,
    InvalidSignatureError,
    InvalidTokenDataError,
    KeyMaterialError,
    MalformedTokenError,
    UnknownClaimError,
    UnsupportedAlgorithmError,
)
from .evaluator import ClaimEvaluator, EvaluationResult
from .generator import TokenGenerator
from .keys import KeyStorage, StaticKeyStorage
from .models import TokenPayload
from .parser import TokenParser, split_token

__version__ = "0.1.0"
__all__ = [
    "Claim",
    "ClaimEvaluator",
    "ClaimNotFoundError",
    "ClaimRegistry",
    "ClaimValidationError",
    "EvaluationResult",
    "HashAuthConfig",
    "HashAuthError",
    "InvalidSignatureError",
    "InvalidTokenDataError",
    "KeyMaterialError",
    "KeyStorage",
    "MalformedTokenError",
    "StaticKeyStorage",
    "TokenGenerator",
    "TokenParser",
    "TokenPayload",
    "UnknownClaimError",
    "UnsupportedAlgorithmError",
    "default_registry",
    "load_config",
]
