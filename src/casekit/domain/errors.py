"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================

INVALID_ARGUMENT_MSG = "Input must be a string"  # pragma: no mutate


class CaseKitError(Exception):
    """Base class for casekit errors."""


class InvalidArgumentError(CaseKitError, TypeError):
    """Raised when a conversion receives a value that is not a string."""

    def __init__(self, value: object) -> None:
        super().__init__(INVALID_ARGUMENT_MSG)
        self.value_type = type(value)


# ============================================================================
#                           Case style errors
# ============================================================================


class UnknownCaseStyleError(CaseKitError, ValueError):
    """Raised when a case style name does not match any known style."""

    def __init__(self, style: str, valid_styles: list[str]) -> None:
        super().__init__(
            f"Unknown case style '{style}'. "
            f"Expected one of: {', '.join(valid_styles)}."
        )
        self.style = style
        self.valid_styles = valid_styles
