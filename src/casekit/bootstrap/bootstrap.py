"""Build the default case converter."""

from casekit.adapters.case_converter import WordCaseConverter
from casekit.interfaces.case_converter import CaseConverter


def default_converter() -> CaseConverter:
    """Return the CaseConverter used by the package-level functions and the CLI."""
    return WordCaseConverter()
