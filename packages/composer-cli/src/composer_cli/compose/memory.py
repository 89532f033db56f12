from typing import Optional

import click
from composer_core.validation.memory import format_memory_size, validate_memory_size
from composer_tools.report import render_memory_validation

from .options import load_limits, policy_option


@click.group()
def memory() -> None:
    """Memory size validation helpers."""
    pass


@memory.command("validate")
@click.argument("raw", type=str)
@policy_option
def memory_validate(raw: str, policy: Optional[str]) -> None:
    """Validate a memory size the way the composer form does."""
    outcome = validate_memory_size(raw, load_limits(policy))
    render_memory_validation(outcome)
    if not outcome.ok:
        raise SystemExit(1)


@memory.command("format")
@click.argument("raw", type=str)
def memory_format(raw: str) -> None:
    """Regroup a memory size with thousands separators."""
    click.echo(format_memory_size(raw))
