"""
Finder configuration.

Passed explicitly to the engine; nothing in the pipeline reads globals.
"""

import os
import logging
from pydantic import BaseModel, Field, field_validator

DEFAULT_TOP_K = 10


class FinderConfig(BaseModel):
    """Tunables for a RehearsalFinder."""
    top_k: int = Field(default=DEFAULT_TOP_K, ge=1, description="Maximum number of slots returned")
    log_level: str = Field(default="INFO", description="Logging level name for the runner")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        level = str(v).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_env(cls) -> "FinderConfig":
        """Build a config from REHEARSAL_* environment variables, falling back to defaults."""
        values = {}
        if os.environ.get("REHEARSAL_TOP_K"):
            values["top_k"] = os.environ["REHEARSAL_TOP_K"]
        if os.environ.get("REHEARSAL_LOG_LEVEL"):
            values["log_level"] = os.environ["REHEARSAL_LOG_LEVEL"]
        return cls(**values)
