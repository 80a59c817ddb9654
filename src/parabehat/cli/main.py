# src/parabehat/cli/main.py

"""
Main CLI entry point for parabehat using Click.
Handles global options like logging level.
"""

from importlib.metadata import PackageNotFoundError, version

import click
import structlog

from parabehat.cli.run_cmds import list_cli, run_cli
from parabehat.cli.utils import configure_logging, logging_options
from parabehat.telemetry import StructLogger

try:
    __version__ = version("parabehat")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

log: StructLogger = structlog.get_logger("cli.main")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", package_name="parabehat")
@logging_options
@click.pass_context
def cli(
    ctx: click.Context,
    log_level: str | None,
    log_file: str | None,
    json_logs: bool | None,
):
    """
    Parabehat: run Behat feature files in parallel.

    Every feature file is executed by its own test process; live progress
    from all of them is merged into one report.
    """
    configure_logging(ctx)
    log.debug(
        "Main CLI group initialized",
        log_level=log_level,
        log_file=log_file,
        json_logs=json_logs,
    )


cli.add_command(run_cli)
cli.add_command(list_cli)

if __name__ == "__main__":
    cli()

# 🖥️⚙️
