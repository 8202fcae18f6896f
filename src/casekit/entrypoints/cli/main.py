"""casekit CLI entry point.

Defines the top-level ``casekit`` group (via Click-Extra) and registers the
conversion commands.

Commands
- ``casekit convert``: convert TEXT arguments or stdin lines to a casing.
- ``casekit styles``: list the supported casings with an example.

Logging
- The console shows WARNING and above; ``-v``/``-q`` move that threshold.
- ``--trace`` writes every segmentation to a file at DEBUG, leaving the
  console untouched.

Examples
    $ casekit convert --to kebab "myVariableName"
    $ printf 'first name\\nuser_id\\n' | casekit convert --to camel
    $ casekit --trace convert "XMLHttpRequest"
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from casekit import __version__
from casekit.logging import (
    config_console_handler,
    config_trace_file,
    default_trace_path,
    log_startup,
)

from .convert import convert, styles
from .helpers.log_level_parser import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """Convert strings between snake_case, camelCase, kebab-case and dot.case.

    Separators (spaces, hyphens, underscores) and camelCase humps mark word
    boundaries; punctuation and symbols are dropped.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[clickx.ColorOption(show_envvar=True), clickx.ExtraVersionOption()],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Lower the WARNING console threshold one level per repetition.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Raise the WARNING console threshold one level per repetition.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Show DEBUG records on the console with logger names and source lines.",
)
@click.option(
    "--trace/--no-trace",
    default=False,
    help="Write every segmentation step at DEBUG to the trace file.",
)
@click.option(
    "--trace-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar="CASEKIT_TRACE_PATH",
    show_envvar=True,
    help="Trace file used with --trace. Defaults to trace.log in the user log directory.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="CASEKIT_LOGGER_LEVEL",
    show_envvar=True,
    help=(
        "Set the minimum level of a logger (NAME=LEVEL), for both console and "
        "trace. Repeatable, or a comma/space list in CASEKIT_LOGGER_LEVEL."
    ),
)
@clickx.pass_context
def casekit(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    trace: bool,
    trace_path: Path | None,
    logger_levels: dict[str, int],
) -> None:
    """casekit command-line interface."""
    level = logging.WARNING - 10 * verbose_count + 10 * quiet_count
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]
    if trace:
        trace_path = trace_path or default_trace_path()
        handlers.append(config_trace_file(trace_path))
    else:
        trace_path = None

    # root passes everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=logging.DEBUG if debug else level,
        trace_path=trace_path,
        logger_levels=logger_levels,
    )
    ctx.call_on_close(logging.shutdown)


casekit.add_command(convert)
casekit.add_command(styles)
