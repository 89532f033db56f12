from typing import Optional

import click
from composer_core.models.hardware import CPUModel
from composer_core.selection.rules import match_rule
from composer_core.validation.memory import MemorySizeError, parse_memory_size
from composer_tools.report import render_recommendations

from .options import load_limits, policy_option


@click.command("select")
@click.option(
    "--cpu",
    type=click.Choice([m.value for m in CPUModel], case_sensitive=False),
    default=CPUModel.POWER.value,
    show_default=True,
    help="CPU model.",
)
@click.option(
    "--memory",
    type=str,
    required=True,
    help="Memory size in MB; thousands separators allowed (e.g., 524,288).",
)
@click.option(
    "--gpu/--no-gpu",
    default=False,
    show_default=True,
    help="Whether a GPU accelerator card is present.",
)
@click.option("--explain", is_flag=True, default=False, help="Show which rule produced the options.")
@policy_option
def select(cpu: str, memory: str, gpu: bool, explain: bool, policy: Optional[str]) -> None:
    """Recommend server models for a CPU, memory size and GPU combination."""
    limits = load_limits(policy)
    try:
        memory_mb = parse_memory_size(memory, limits)
    except MemorySizeError as e:
        raise click.ClickException(e.message) from e

    cpu_model = CPUModel(cpu)
    rule = match_rule(cpu_model, memory_mb, gpu)
    render_recommendations(cpu_model, memory_mb, gpu, rule.models, rule=rule if explain else None)
