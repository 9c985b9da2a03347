"""objtasks CLI entry point: Click group with subcommands."""

import logging

import click

from objtasks import __version__
from objtasks.config import BuilderConfig

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(version=__version__, prog_name="objtasks")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=BuilderConfig.log_level,
    show_default=True,
    help="Logging verbosity.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """objtasks - build and validate CSS selectors, round-trip shapes through JSON."""
    config = BuilderConfig(log_level=log_level.upper())
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from objtasks.cli.build import build  # noqa: E402
from objtasks.cli.shapes import area, json_cmd  # noqa: E402
from objtasks.cli.validate import validate  # noqa: E402

cli.add_command(build)
cli.add_command(validate)
cli.add_command(json_cmd)
cli.add_command(area)
