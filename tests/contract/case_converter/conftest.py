"""Fixtures for case_converter contract tests."""

from collections.abc import Iterable

import pytest

from casekit.adapters.case_converter import WordCaseConverter
from casekit.interfaces.case_converter import CaseConverter


@pytest.fixture(params=["word"])
def case_converter(request: pytest.FixtureRequest) -> Iterable[CaseConverter]:
    """Return a fresh CaseConverter instance for the requested implementation.

    Supported params:
      - `"word"` → WordCaseConverter

    Extend by adding new identifiers to `params` and branching below to
    construct the corresponding implementation.
    """

    match request.param:
        case "word":
            yield WordCaseConverter()
        case _:
            raise ValueError(f"unknown case converter type: {request.param}")
