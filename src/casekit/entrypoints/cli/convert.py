"""casekit conversion commands.

Provides ``casekit convert``, which re-emits each input in the requested
casing, and ``casekit styles``, which lists the available styles.

Behavior
- Converted text goes to **stdout**, one result per input, so the command can
  sit in a pipeline. Notices go to **stderr**.
- With no TEXT arguments, each line of stdin is converted.
- Inputs with no letters or digits convert to an empty line and trigger a
  warning.

Failure modes
- ``CASEKIT_DEFAULT_STYLE`` naming an unknown style (and no ``--to``) →
  ``ClickException`` listing the valid styles.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from casekit import config
from casekit.bootstrap import default_converter
from casekit.interfaces.case_converter import CaseStyle

from .helpers import warn

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

STYLE_NAMES = [style.value for style in CaseStyle]
STYLES_SAMPLE = "myVariable name"  # pragma: no mutate


def _default_style() -> CaseStyle:
    try:
        return config.get_default_style()
    except config.DefaultStyleNotValidError as e:
        raise click.ClickException(str(e)) from e


def _read_inputs(texts: tuple[str, ...]) -> Iterable[str]:
    if texts:
        return texts
    stdin = click.get_text_stream("stdin")
    return (line.rstrip("\r\n") for line in stdin)


@click.command()
@click.option(
    "--to",
    "-t",
    "style",
    type=click.Choice(STYLE_NAMES, case_sensitive=False),
    default=None,
    help=(
        "Target casing. Defaults to $CASEKIT_DEFAULT_STYLE, "
        "or 'snake' when that is unset."
    ),
)
@click.argument("texts", nargs=-1)
def convert(style: str | None, texts: tuple[str, ...]) -> None:
    """Convert TEXT (or each line of stdin) to the target casing."""
    target = CaseStyle(style.lower()) if style else _default_style()
    converter = default_converter()
    logger.info("Converting to %s case", target.value)

    for text in _read_inputs(texts):
        result = converter.convert(text, target)
        if not result:
            warn(f"{text!r} has no letters or digits; converted to an empty line.")
        click.echo(result)


@click.command()
def styles() -> None:
    """List the available styles with an example conversion."""
    converter = default_converter()
    width = max(len(name) for name in STYLE_NAMES)
    for style in CaseStyle:
        example = converter.convert(STYLES_SAMPLE, style)
        click.echo(f"{style.value:<{width}}  {example}")
