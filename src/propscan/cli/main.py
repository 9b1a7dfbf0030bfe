"""propscan CLI."""

import click

from propscan.cli.check import check_command
from propscan.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="propscan")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """propscan - find private properties nobody reads or writes."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(check_command, name="check")


if __name__ == "__main__":
    cli()
