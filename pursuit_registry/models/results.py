"""Operation results returned by the registry."""

from enum import Enum

from pydantic import BaseModel


class ErrorKind(str, Enum):
    ENTITY_MISSING = "EntityMissing"        # No pursuit for the addressed key
    INPUT_INVALID = "InputInvalid"          # Argument violates a documented constraint
    RECORD_CONFLICT = "RecordConflict"      # Key already holds a pursuit


class OperationResult(BaseModel):
    """Successful write confirmation."""

    ok: bool = True
    participant: str
    message: str


class VerificationResult(BaseModel):
    """Read-path view of a participant's pursuit."""

    present: bool = False
    length: int = 0
    completed: bool = False
