from .transitions import (
    blur_memory_size,
    change_cpu_model,
    change_memory_size,
    focus_memory_size,
    render_view,
    submit,
    toggle_gpu,
)

__all__ = [
    "blur_memory_size",
    "change_cpu_model",
    "change_memory_size",
    "focus_memory_size",
    "render_view",
    "submit",
    "toggle_gpu",
]
