"""Word segmentation and joining shared by every case conversion.

A conversion runs in two stages. `split_words` validates and cleans the input
and breaks it into words; `lower_join` or `camel_join` then re-emits those
words in the target convention.

Segmentation rules:
- Every character other than an ASCII letter, ASCII digit, whitespace,
  hyphen or underscore is removed. Removal does not create a word boundary,
  so ``"test@#$%case"`` is a single word.
- Whitespace is the ECMAScript set. The information separators
  ``\\x1c``-``\\x1f`` and NEL ``\\x85`` are not whitespace here and get removed.
- Runs of whitespace, hyphens and underscores (plus any extra separators the
  caller passes) form one boundary.
- A lowercase letter directly followed by an uppercase letter forms a
  boundary. Uppercase runs are never split, so ``"XMLHttpRequest"`` yields
  ``("XMLHttp", "Request")``.
"""

import re
from collections.abc import Sequence
from functools import lru_cache

from casekit.domain.errors import InvalidArgumentError

WHITESPACE = (  # pragma: no mutate
    "\t\n\v\f\r \N{NO-BREAK SPACE}\N{OGHAM SPACE MARK}"
    "\N{EN QUAD}-\N{HAIR SPACE}\N{LINE SEPARATOR}\N{PARAGRAPH SEPARATOR}"
    "\N{NARROW NO-BREAK SPACE}\N{MEDIUM MATHEMATICAL SPACE}"
    "\N{IDEOGRAPHIC SPACE}\N{ZERO WIDTH NO-BREAK SPACE}"
)
BASE_SEPARATORS = WHITESPACE + r"\-_"  # pragma: no mutate
ALNUM_PATTERN = re.compile(r"[a-zA-Z0-9]")
CAMEL_BOUNDARY_PATTERN = re.compile(r"(?<=[a-z])(?=[A-Z])")


@lru_cache(maxsize=None)
def _patterns(extra_separators: str) -> tuple[re.Pattern[str], re.Pattern[str]]:
    """Return the (disallowed, separator) patterns for a set of extra separators."""
    separators = BASE_SEPARATORS + re.escape(extra_separators)
    disallowed = re.compile(rf"[^a-zA-Z0-9{separators}]")
    separator_run = re.compile(rf"[{separators}]+")
    return disallowed, separator_run


def ensure_text(value: object) -> str:
    """Return ``value`` unchanged if it is a string.

    Raises:
        InvalidArgumentError: If ``value`` is not a ``str``.
    """
    if not isinstance(value, str):
        raise InvalidArgumentError(value)
    return value


def clean(text: str, extra_separators: str = "") -> str:
    """Strip every character that is neither alphanumeric nor a separator.

    Args:
        text: Raw input text.
        extra_separators: Characters kept and treated as separators in addition
            to whitespace, hyphen and underscore (e.g. ``"."`` for dot.case).

    Returns:
        The cleaned text. Separators are kept as-is.
    """
    disallowed, _ = _patterns(extra_separators)
    return disallowed.sub("", text)


def split_words(text: object, extra_separators: str = "") -> tuple[str, ...]:
    """Validate ``text`` and split it into words.

    Args:
        text: The value to segment. Must be a ``str``.
        extra_separators: Characters treated as separators in addition to
            whitespace, hyphen and underscore.

    Returns:
        The words in input order, with their original casing. Empty when no
        alphanumeric character survives cleaning.

    Raises:
        InvalidArgumentError: If ``text`` is not a ``str``.
    """
    cleaned = clean(ensure_text(text), extra_separators)
    if not ALNUM_PATTERN.search(cleaned):
        return ()
    _, separator_run = _patterns(extra_separators)
    spaced = CAMEL_BOUNDARY_PATTERN.sub(" ", cleaned)
    return tuple(word for word in separator_run.split(spaced) if word)


def lower_join(words: Sequence[str], separator: str) -> str:
    """Lowercase every word and join them with ``separator``."""
    return separator.join(word.lower() for word in words)


def camel_join(words: Sequence[str]) -> str:
    """Join words as camelCase.

    The first word is lowercased; every following word is lowercased and then
    gets its first character uppercased.
    """
    lowered = [word.lower() for word in words]
    if not lowered:
        return ""
    head, *tail = lowered
    return head + "".join(word[:1].upper() + word[1:] for word in tail)
