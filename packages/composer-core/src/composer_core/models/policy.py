# composer_core/models/policy.py
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from composer_core.models.memory import MemoryLimits


class ComposerPolicy(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    # Accept both `memory` and `memory-limits` in YAML
    memory: MemoryLimits = Field(
        default_factory=MemoryLimits,
        validation_alias=AliasChoices("memory", "memory-limits", "memory_limits"),
    )
