"""Interactive terminal driver for the composer form."""

from __future__ import annotations

from composer_core.form import (
    blur_memory_size,
    change_cpu_model,
    change_memory_size,
    focus_memory_size,
    render_view,
    submit,
    toggle_gpu,
)
from composer_core.models.form import FormState
from composer_core.models.hardware import CPUModel
from composer_core.models.memory import MemoryLimits
from composer_core.validation.memory import DEFAULT_LIMITS, helper_text
from rich.prompt import Confirm, Prompt

from . import report

DEFAULT_MAX_ATTEMPTS = 3


def run_form_session(
    limits: MemoryLimits = DEFAULT_LIMITS,
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> FormState:
    """Walk the user through the form and return the final snapshot.

    Memory size is re-prompted after a blocked submit, up to ``max_attempts``.
    """
    report.console.print("\n[bold cyan]Server Composer[/bold cyan]\n")
    state = FormState()

    cpu = Prompt.ask(
        "CPU",
        choices=[m.value for m in CPUModel],
        default=state.cpu_model.value,
        console=report.console,
    )
    state = change_cpu_model(state, cpu)
    state = toggle_gpu(state, Confirm.ask("GPU Accelerator Card", default=False, console=report.console))

    for _ in range(max_attempts):
        state = focus_memory_size(state)
        raw = Prompt.ask(f"Memory size (MB) [dim]{helper_text(limits)}[/dim]", console=report.console)
        state = change_memory_size(state, raw)
        state = blur_memory_size(state, limits)
        state = submit(state, limits)
        report.render_form_view(render_view(state, limits))
        if not state.error_present:
            break

    return state
