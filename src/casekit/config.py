"""Configuration utilities for casekit.

This module centralizes small helpers and constants related to runtime
configuration read from the environment.
"""

import os

from casekit.domain.errors import CaseKitError
from casekit.interfaces.case_converter import CaseStyle

DEFAULT_STYLE_ENV_VAR = "CASEKIT_DEFAULT_STYLE"  # pragma: no mutate
FALLBACK_STYLE = CaseStyle.SNAKE


class DefaultStyleNotValidError(CaseKitError):
    """Raised when CASEKIT_DEFAULT_STYLE names an unknown case style."""

    def __init__(self, value: str) -> None:
        valid = ", ".join(style.value for style in CaseStyle)
        super().__init__(
            f"{DEFAULT_STYLE_ENV_VAR}={value!r} is not a valid case style. "
            f"Expected one of: {valid}."
        )
        self.value = value


def get_default_style() -> CaseStyle:
    """Get the default conversion style from the environment.

    Returns:
        The style named by `CASEKIT_DEFAULT_STYLE` (case-insensitive), or
        snake case when the variable is unset or empty.

    Raises:
        DefaultStyleNotValidError: If `CASEKIT_DEFAULT_STYLE` names an unknown style.
    """
    if not (value := os.environ.get(DEFAULT_STYLE_ENV_VAR, "").strip()):
        return FALLBACK_STYLE
    try:
        return CaseStyle(value.lower())
    except ValueError as e:
        raise DefaultStyleNotValidError(value) from e
