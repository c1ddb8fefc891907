"""groupjoin CLI entry point.

Defines the top-level ``groupjoin`` command and registers the directory
subcommands (``seed``, ``assign``, ``roles``, ``reset``).

Examples
    $ groupjoin --version
    $ GROUPJOIN_DB_URL=sqlite:///demo.db groupjoin seed
    $ GROUPJOIN_DB_URL=sqlite:///demo.db groupjoin roles 1
"""

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from groupjoin import __version__, config
from groupjoin.logging import console_handler, log_startup
from groupjoin.logging import flight_recorder as make_flight_recorder

from .directory import assign, reset, roles, seed
from .helpers.log_level_parser import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """groupjoin command-line interface.

    Manage users, roles and role assignments, and list every role together with
    the assignments of one user. The storage backend is chosen by GROUPJOIN_DB_URL:
    a SQLAlchemy URL (SQLite or PostgreSQL) or memory://NAME.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file written by the flight recorder.",
    default=lambda: Path(user_log_dir("groupjoin", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="GROUPJOIN_LOG_PATH",
    show_default="<user log dir>/latest.log",
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=2000,
    hidden=True,
    envvar="GROUPJOIN_FLIGHT_RECORDER_CAPACITY",
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    help=(
        "Keep the last N log records at DEBUG granularity (unaffected by -v/-q) "
        "and write them to --log-path when a WARNING/ERROR occurs, or on exit "
        "if --force-flush is set."
    ),
    default=True,
    envvar="GROUPJOIN_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush",
    help="Write the flight recorder buffer to --log-path on exit.",
    default=False,
    show_default=True,
    envvar="GROUPJOIN_FORCE_FLUSH",
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight recorder. Repeatable (e.g. -L sqlalchemy=INFO) or via "
        "GROUPJOIN_LOGGER_LEVELS (comma/space list)."
    ),
    default=("sqlalchemy=WARNING",),
    envvar="GROUPJOIN_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def groupjoin(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """groupjoin command-line interface."""

    # 0) compute effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) console handler, plus the flight recorder if enabled
    handlers: list[Handler] = [
        console_handler(level, debug=debug, color=ctx.color is not False)
    ]
    if flight_recorder:
        handlers.append(
            make_flight_recorder(
                log_path, flight_recorder_capacity, flush_on_close=force_flush
            )
        )

    # 2) root logger captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 3) per-logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        recorder_path=log_path if flight_recorder else None,
        db_url=os.environ.get(config.DB_URL_ENV_VAR),
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


for _command in (seed, assign, roles, reset):
    groupjoin.add_command(_command)
