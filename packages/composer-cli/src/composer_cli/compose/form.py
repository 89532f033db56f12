from typing import Optional

import click
from composer_tools.report import render_rules
from composer_tools.session import DEFAULT_MAX_ATTEMPTS, run_form_session

from .options import load_limits, policy_option


@click.command("rules")
def rules() -> None:
    """Show the server model rule table."""
    render_rules()


@click.command("form")
@click.option(
    "--attempts",
    type=click.IntRange(min=1),
    default=DEFAULT_MAX_ATTEMPTS,
    show_default=True,
    help="How many times to ask for a memory size before giving up.",
)
@policy_option
def form(attempts: int, policy: Optional[str]) -> None:
    """Fill in the composer form interactively."""
    state = run_form_session(load_limits(policy), max_attempts=attempts)
    if state.error_present:
        raise SystemExit(1)
