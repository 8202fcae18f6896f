"""Interfaces for converting strings between casing conventions.

This module defines the CaseStyle enumeration and the CaseConverter contract.
Implementations provide `convert`; the per-style methods are thin wrappers
over it so every style shares the same validation and segmentation path.
"""

import abc
from enum import Enum

# pylint: disable=too-few-public-methods


class CaseStyle(Enum):
    """Enumeration of supported casing conventions.

    Styles:
    - SNAKE: ``my_variable_name``
    - CAMEL: ``myVariableName``
    - KEBAB: ``my-variable-name``
    - DOT: ``my.variable.name``
    """

    SNAKE = "snake"
    CAMEL = "camel"
    KEBAB = "kebab"
    DOT = "dot"

    @property
    def separator(self) -> str:
        """Return the character placed between words ("" for camelCase)."""
        return _SEPARATORS[self]


_SEPARATORS = {
    CaseStyle.SNAKE: "_",
    CaseStyle.CAMEL: "",
    CaseStyle.KEBAB: "-",
    CaseStyle.DOT: ".",
}


class CaseConverter(abc.ABC):
    """Contract for converting strings between casing conventions.

    Implementations must be pure: the same input always yields the same
    output, and no call affects another.
    """

    @abc.abstractmethod
    def convert(self, text: object, style: CaseStyle | str) -> str:
        """Convert ``text`` to ``style``.

        Args:
            text: The value to convert. Non-string values are rejected.
            style: A CaseStyle member or its string value.

        Returns:
            The converted string, or ``""`` when ``text`` holds no letters or
            digits.
        """

    def to_snake_case(self, text: object) -> str:
        """Convert ``text`` to snake_case."""
        return self.convert(text, CaseStyle.SNAKE)

    def to_camel_case(self, text: object) -> str:
        """Convert ``text`` to camelCase."""
        return self.convert(text, CaseStyle.CAMEL)

    def to_kebab_case(self, text: object) -> str:
        """Convert ``text`` to kebab-case."""
        return self.convert(text, CaseStyle.KEBAB)

    def to_dot_case(self, text: object) -> str:
        """Convert ``text`` to dot.case."""
        return self.convert(text, CaseStyle.DOT)
