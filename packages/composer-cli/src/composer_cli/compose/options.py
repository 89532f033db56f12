from typing import Optional

import click
from composer_core.data.policy import load_composer_policy
from composer_core.models.memory import MemoryLimits

policy_option = click.option(
    "--policy",
    type=click.Path(path_type=str, dir_okay=False, exists=False),
    default=None,
    help="Composer policy YAML (memory limits). Defaults to doctrine/composer-policy.yaml when present.",
)


def load_limits(policy: Optional[str]) -> MemoryLimits:
    """Resolve memory limits for a command, turning policy errors into a clean CLI error."""
    try:
        return load_composer_policy(policy).memory
    except (OSError, ValueError) as e:
        raise click.ClickException(str(e)) from e
