"""Registry configuration."""

import os
from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator

ENV_PREFIX = "PURSUIT_REGISTRY_"


class RegistryConfig(BaseModel):
    """Configuration for the Pursuit Registry."""

    max_charter_length: int = Field(default=100, ge=1, le=100)  # May only tighten
    min_priority: int = Field(default=1, ge=1, le=3)
    max_priority: int = Field(default=3, ge=1, le=3)
    db_path: Optional[str] = None           # None keeps the maps in memory
    clock: Literal["manual", "monotonic"] = "monotonic"
    initial_clock: int = Field(default=0, ge=0)
    cascade_delete: bool = False            # Drop priority/deadline with the pursuit
    log_level: str = "INFO"

    @model_validator(mode="after")
    def _check_priority_range(self) -> "RegistryConfig":
        if self.min_priority > self.max_priority:
            raise ValueError("min_priority must not exceed max_priority")
        return self

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "RegistryConfig":
        """Build a config from PURSUIT_REGISTRY_* environment variables."""
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            key = f"{ENV_PREFIX}{name.upper()}"
            if key in environ:
                values[name] = environ[key]
        return cls.model_validate(values)
