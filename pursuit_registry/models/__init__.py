"""Pursuit Registry data models."""

from pursuit_registry.models.config import RegistryConfig
from pursuit_registry.models.pursuit import (
    DeadlineEntry,
    PriorityEntry,
    PriorityTier,
    PursuitRecord,
)
from pursuit_registry.models.results import (
    ErrorKind,
    OperationResult,
    VerificationResult,
)

__all__ = [
    "DeadlineEntry",
    "ErrorKind",
    "OperationResult",
    "PriorityEntry",
    "PriorityTier",
    "PursuitRecord",
    "RegistryConfig",
    "VerificationResult",
]
