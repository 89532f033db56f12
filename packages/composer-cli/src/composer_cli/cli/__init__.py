import logging

import click
from composer_cli.compose.form import form, rules
from composer_cli.compose.memory import memory
from composer_cli.compose.select import select
from composer_core.codebase.debug import configure_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


# add cli commands here

cli.add_command(select)
cli.add_command(memory)
cli.add_command(rules)
cli.add_command(form)
