from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from composer_core.models.hardware import CPUModel, ServerModel
from composer_core.models.memory import MemoryErrorKind


class FormState(BaseModel):
    """Snapshot of one composer form session. Never mutated; transitions return copies."""

    model_config = ConfigDict(frozen=True)

    cpu_model: CPUModel = CPUModel.POWER
    memory_size: str = ""
    gpu_present: bool = False
    memory_error: Optional[MemoryErrorKind] = None
    error_present: bool = False
    results: Tuple[ServerModel, ...] = ()
    show_results: bool = False


class FormView(BaseModel):
    """What the presentation layer renders for a given FormState."""

    model_config = ConfigDict(frozen=True)

    error_present: bool
    error_message: Optional[str] = None
    results: Tuple[ServerModel, ...] = ()
    show_results: bool = False
    memory_helper_text: str
    banner_message: Optional[str] = None
