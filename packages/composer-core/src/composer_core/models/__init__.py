from .form import FormState, FormView
from .hardware import CPUModel, ServerModel
from .memory import MemoryErrorKind, MemoryLimits, MemoryValidation
from .policy import ComposerPolicy

__all__ = [
    "CPUModel",
    "ComposerPolicy",
    "FormState",
    "FormView",
    "MemoryErrorKind",
    "MemoryLimits",
    "MemoryValidation",
    "ServerModel",
]
