# src/parabehat/cli/utils.py

import logging

import click

from parabehat.telemetry.logger import setup_logging

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOGGING_PARAMS = ("log_level", "log_file", "json_logs")


def logging_options(f):
    """Adds --log-level, --log-file and --json-logs to the group or a command."""
    f = click.option(
        "-l",
        "--log-level",
        type=click.Choice(LOG_LEVELS, case_sensitive=False),
        default=None,
        envvar="PARABEHAT_LOG_LEVEL",
        help=f"Logging level for messages on stderr [default: {DEFAULT_LOG_LEVEL}].",
    )(f)
    f = click.option(
        "--log-file",
        type=click.Path(dir_okay=False, writable=True, resolve_path=True),
        default=None,
        envvar="PARABEHAT_LOG_FILE",
        help="Also write logs to this file, as JSON.",
    )(f)
    f = click.option(
        "--json-logs",
        is_flag=True,
        default=None,
        envvar="PARABEHAT_JSON_LOGS",
        help="Render stderr logs as JSON.",
    )(f)
    return f


def configure_logging(ctx: click.Context, **overrides) -> None:
    """
    Sets up logging for the invoked command.

    Values given after the subcommand name win over the ones given to the
    `parabehat` group; anything unset falls back to WARNING on stderr.
    """
    settings = dict.fromkeys(LOGGING_PARAMS)
    for source in (ctx.find_root().params, overrides):
        settings.update((name, source[name]) for name in LOGGING_PARAMS if source.get(name))

    setup_logging(
        level=getattr(logging, (settings["log_level"] or DEFAULT_LOG_LEVEL).upper()),
        json_logs=bool(settings["json_logs"]),
        log_file=settings["log_file"],
    )

# ⚙️🛠️
