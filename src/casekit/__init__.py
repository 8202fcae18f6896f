"""casekit

Convert arbitrary strings between casing conventions: snake_case, camelCase,
kebab-case and dot.case. Every conversion is a pure text transform built on
one shared word-segmentation pipeline.
"""

from casekit.bootstrap import default_converter
from casekit.domain.errors import (
    CaseKitError,
    InvalidArgumentError,
    UnknownCaseStyleError,
)
from casekit.interfaces.case_converter import CaseStyle

__all__ = [
    "__version__",
    "CaseKitError",
    "CaseStyle",
    "InvalidArgumentError",
    "UnknownCaseStyleError",
    "convert",
    "to_camel_case",
    "to_dot_case",
    "to_kebab_case",
    "to_snake_case",
]
__version__ = "0.1.0"

_converter = default_converter()


def to_snake_case(text: object) -> str:
    """Convert ``text`` to snake_case (``"myVariable"`` -> ``"my_variable"``)."""
    return _converter.to_snake_case(text)


def to_camel_case(text: object) -> str:
    """Convert ``text`` to camelCase (``"first name"`` -> ``"firstName"``)."""
    return _converter.to_camel_case(text)


def to_kebab_case(text: object) -> str:
    """Convert ``text`` to kebab-case (``"myVariable"`` -> ``"my-variable"``)."""
    return _converter.to_kebab_case(text)


def to_dot_case(text: object) -> str:
    """Convert ``text`` to dot.case (``"camelCaseText"`` -> ``"camel.case.text"``)."""
    return _converter.to_dot_case(text)


def convert(text: object, style: CaseStyle | str) -> str:
    """Convert ``text`` to the casing named by ``style``.

    Args:
        text: The value to convert. Must be a ``str``.
        style: A ``CaseStyle`` member or its value (``"snake"``, ``"camel"``,
            ``"kebab"``, ``"dot"``).

    Returns:
        The converted string, possibly empty.

    Raises:
        InvalidArgumentError: If ``text`` is not a string.
        UnknownCaseStyleError: If ``style`` does not name a known style.
    """
    return _converter.convert(text, style)
