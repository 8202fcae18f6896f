"""Global pytest fixtures for casekit."""

import pytest

from casekit.bootstrap import default_converter
from casekit.interfaces.case_converter import CaseConverter


@pytest.fixture
def converter() -> CaseConverter:
    """Return the converter wired up by the composition root."""
    return default_converter()
