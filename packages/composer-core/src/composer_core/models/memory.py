# composer_core/models/memory.py
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class MemoryErrorKind(StrEnum):
    MIN = "MIN"
    MAX = "MAX"
    NOT_MULTIPLE = "NOT_MULTIPLE"
    INVALID_CHARACTERS = "INVALID_CHARACTERS"


class MemoryLimits(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    min_mb: int = 4096
    max_mb: int = 8388608
    multiple_mb: int = Field(default=1024, ge=1)

    @model_validator(mode="after")
    def _check_range(self) -> "MemoryLimits":
        if self.min_mb <= 0:
            raise ValueError(f"min_mb must be positive, got {self.min_mb}")
        if self.min_mb > self.max_mb:
            raise ValueError(f"min_mb ({self.min_mb}) must not exceed max_mb ({self.max_mb})")
        return self


class MemoryValidation(BaseModel):
    """Outcome of validating one raw memory size string."""

    model_config = ConfigDict(frozen=True)

    raw: str
    value: Optional[int] = None
    error: Optional[MemoryErrorKind] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
