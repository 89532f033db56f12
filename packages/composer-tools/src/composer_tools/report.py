from __future__ import annotations

from typing import Optional, Sequence

from composer_core.models.form import FormView
from composer_core.models.hardware import CPUModel, ServerModel
from composer_core.models.memory import MemoryValidation
from composer_core.selection.rules import NO_MATCH_RULE, SELECTION_RULES, SelectionRule
from rich.console import Console
from rich.table import Table

console = Console()


# ----------------------------
# Recommendations
# ----------------------------


def render_recommendations(
    cpu: CPUModel,
    memory_mb: int,
    gpu: bool,
    models: Sequence[ServerModel],
    *,
    rule: Optional[SelectionRule] = None,
) -> None:
    """Print the server model options for one configuration."""
    console.print("\n[bold cyan]Server Composer[/bold cyan]\n")
    console.print(
        f"CPU: [green]{cpu}[/green]  Memory: [yellow]{memory_mb:,} MB[/yellow]  "
        f"GPU Accelerator Card: [magenta]{'yes' if gpu else 'no'}[/magenta]\n"
    )
    console.print("[bold]Server Model Options[/bold]")
    for model in models:
        console.print(f"  • {model}")
    if rule is not None:
        console.print(f"\n[dim]Matched rule {rule.code}: {rule.description}.[/dim]")


def render_rules() -> None:
    """Print the selection rule table in evaluation order."""
    table = Table(title="Server Model Rules (first match wins)")
    table.add_column("Rule")
    table.add_column("Condition")
    table.add_column("Server Models")

    for rule in (*SELECTION_RULES, NO_MATCH_RULE):
        table.add_row(rule.code, rule.description, ", ".join(rule.models))

    console.print(table)


# ----------------------------
# Memory validation
# ----------------------------


def render_memory_validation(outcome: MemoryValidation) -> None:
    if outcome.ok:
        console.print(f"[green]{outcome.value:,} MB[/green] ({outcome.value})")
    else:
        console.print(f"[red]{outcome.error}[/red]: {outcome.message}")


# ----------------------------
# Form view
# ----------------------------


def render_form_view(view: FormView) -> None:
    """Render a FormView the way the composer form lays it out."""
    if view.error_message:
        console.print(f"[red]{view.error_message}[/red]")
    else:
        console.print(f"[dim]{view.memory_helper_text}[/dim]")

    if view.error_present and view.banner_message:
        console.print(f"\n[bold red]{view.banner_message}[/bold red]")

    if view.show_results:
        console.print("\n[bold]Server Model Options[/bold]")
        for model in view.results:
            console.print(f"  • {model}")
