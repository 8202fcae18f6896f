"""Terminal message helpers for the casekit CLI.

Small helpers for rendering user-visible lines with emoji→ASCII fallbacks.
Messages write to stderr so converted text on stdout stays machine-readable.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    This is a lightweight guard to decide whether to emit emojis or fall back
    to ASCII so terminals without UTF-8 don't raise `UnicodeEncodeError`.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def caution_glyph() -> str:
    """Warning marker suitable for terminals with/without emoji support.

    Returns:
        str: "⚠️" when the stream supports it; otherwise the ASCII fallback "[!]".
    """
    emoji, fallback = ("⚠️", "[!]")  # pragma: no mutate
    if _supports_character(emoji):
        return emoji
    return fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr** with a caution glyph.

    Args:
        msg: The message to display.

    Example:
        ``⚠️  '@#$%' has no letters or digits; converted to an empty line.``
    """
    g = caution_glyph()
    click.secho(f"{g}  {msg}", fg="yellow", bold=True, err=True)
