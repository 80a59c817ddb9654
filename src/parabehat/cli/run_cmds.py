# src/parabehat/cli/run_cmds.py

import logging
from pathlib import Path

import click
import structlog

from parabehat.cli.utils import configure_logging, logging_options
from parabehat.config import load_config
from parabehat.config.models import DEFAULT_BIN_PATH, DEFAULT_FEATURES_PATH
from parabehat.discovery import discover_test_units
from parabehat.exceptions import ConfigurationError, DiscoveryError, ExecutionEnvironmentError
from parabehat.runtime.orchestrator import RunOrchestrator
from parabehat.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.run")


def features_option(f):
    return click.option(
        "--features",
        "features_path",
        type=click.Path(path_type=Path),
        default=DEFAULT_FEATURES_PATH,
        show_default=True,
        envvar="PARABEHAT_FEATURES",
        show_envvar=True,
        help="Directory searched recursively for feature files.",
    )(f)


@click.command(name="run")
@click.option(
    "-c",
    "--concurrency",
    type=click.IntRange(min=1),
    default=None,
    envvar="PARABEHAT_CONCURRENCY",
    show_envvar=True,
    help="Number of test processes run at once (defaults to the number of CPUs).",
)
@click.option(
    "--bin",
    "bin_path",
    type=click.Path(path_type=Path),
    default=DEFAULT_BIN_PATH,
    show_default=True,
    envvar="PARABEHAT_BIN",
    show_envvar=True,
    help="Path to the behat executable.",
)
@features_option
@logging_options
@click.pass_context
def run_cli(
    ctx: click.Context,
    concurrency: int | None,
    bin_path: Path,
    features_path: Path,
    **kwargs,
):
    """Run every feature file in parallel and print an aggregated summary."""
    configure_logging(ctx, **kwargs)

    try:
        config = load_config(concurrency=concurrency, bin_path=bin_path, features_path=features_path)
    except ConfigurationError as e:
        log.error("Invalid configuration", error=str(e))
        click.echo(f"Error: Configuration problem:\n{e}", err=True)
        ctx.exit(1)

    log.info("Initializing run command...", concurrency=config.concurrency)
    orchestrator = RunOrchestrator(config)

    try:
        orchestrator.run()
        # Failing tests are reported but do not change the exit status.
        log.info("'run' command finished.")
    except DiscoveryError as e:
        log.error("Test discovery failed", error=str(e))
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    except ExecutionEnvironmentError as e:
        log.critical("Run aborted", error=str(e))
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    finally:
        logging.shutdown()


@click.command(name="list")
@features_option
@logging_options
@click.pass_context
def list_cli(ctx: click.Context, features_path: Path, **kwargs):
    """List the feature files a run would execute."""
    configure_logging(ctx, **kwargs)

    try:
        units = discover_test_units(features_path)
    except DiscoveryError as e:
        log.error("Test discovery failed", error=str(e))
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    for unit in units:
        click.echo(str(unit))

# 🔼⚙️
