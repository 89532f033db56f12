"""
Pure transitions for the server composer form.

Each function takes a FormState and returns a new one; nothing is mutated.
The presentation layer calls these on its events and renders render_view().
"""

from __future__ import annotations

import logging

from composer_core.models.form import FormState, FormView
from composer_core.models.hardware import CPUModel
from composer_core.models.memory import MemoryLimits
from composer_core.selection.rules import select_server_models
from composer_core.validation.memory import (
    DEFAULT_LIMITS,
    FIX_ERROR_BEFORE_SUBMIT,
    error_message,
    format_memory_size,
    helper_text,
    validate_memory_size,
)

_logger = logging.getLogger("composer.form")


def change_cpu_model(state: FormState, cpu: CPUModel | str) -> FormState:
    return state.model_copy(update={"cpu_model": CPUModel(cpu)})


def change_memory_size(state: FormState, raw: str) -> FormState:
    return state.model_copy(update={"memory_size": format_memory_size(raw)})


def toggle_gpu(state: FormState, present: bool) -> FormState:
    return state.model_copy(update={"gpu_present": bool(present)})


def blur_memory_size(state: FormState, limits: MemoryLimits = DEFAULT_LIMITS) -> FormState:
    outcome = validate_memory_size(state.memory_size, limits)
    return state.model_copy(update={"memory_error": outcome.error})


def focus_memory_size(state: FormState) -> FormState:
    # Clears regardless of the field content; the next blur or submit re-validates.
    return state.model_copy(update={"memory_error": None, "error_present": False})


def submit(state: FormState, limits: MemoryLimits = DEFAULT_LIMITS) -> FormState:
    outcome = validate_memory_size(state.memory_size, limits)
    if outcome.value is None:
        _logger.info("Submit blocked: %s (%r)", outcome.error, state.memory_size)
        return state.model_copy(
            update={
                "memory_error": outcome.error,
                "error_present": True,
                "results": (),
                "show_results": False,
            }
        )

    results = tuple(select_server_models(state.cpu_model, outcome.value, state.gpu_present))
    _logger.info(
        "Submit cpu=%s memory_mb=%d gpu=%s -> %s",
        state.cpu_model,
        outcome.value,
        state.gpu_present,
        ", ".join(results),
    )
    return state.model_copy(
        update={
            "memory_error": None,
            "error_present": False,
            "results": results,
            "show_results": True,
        }
    )


def render_view(state: FormState, limits: MemoryLimits = DEFAULT_LIMITS) -> FormView:
    return FormView(
        error_present=state.error_present,
        error_message=error_message(state.memory_error, limits) if state.memory_error else None,
        results=state.results,
        show_results=state.show_results,
        memory_helper_text=helper_text(limits),
        banner_message=FIX_ERROR_BEFORE_SUBMIT if state.error_present else None,
    )
