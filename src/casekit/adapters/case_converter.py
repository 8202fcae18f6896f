"""Word-pipeline case converter.

This module provides the CaseConverter implementation used throughout
casekit. Each conversion splits the input into words with
`casekit.domain.words.split_words` and re-emits them with the joining rule of
the requested style. The style's own separator is treated as an input
separator too, which keeps every conversion idempotent on its own output.
"""

import logging

from casekit.domain import words
from casekit.domain.errors import UnknownCaseStyleError
from casekit.interfaces import case_converter
from casekit.interfaces.case_converter import CaseStyle

# pylint: disable=too-few-public-methods

logger = logging.getLogger(__name__)


def resolve_style(style: CaseStyle | str) -> CaseStyle:
    """Return the CaseStyle named by ``style``.

    Args:
        style: A CaseStyle member, or a style value matched case-insensitively.

    Raises:
        UnknownCaseStyleError: If ``style`` does not name a known style.
    """
    if isinstance(style, CaseStyle):
        return style
    try:
        return CaseStyle(str(style).strip().lower())
    except ValueError as e:
        raise UnknownCaseStyleError(
            str(style), [member.value for member in CaseStyle]
        ) from e


class WordCaseConverter(case_converter.CaseConverter):
    """CaseConverter that segments input into words and re-joins them."""

    def convert(self, text: object, style: CaseStyle | str) -> str:
        target = resolve_style(style)
        parts = words.split_words(text, target.separator)
        logger.debug("Segmented %r into %s for %s case", text, parts, target.value)

        if target is CaseStyle.CAMEL:
            return words.camel_join(parts)
        return words.lower_join(parts, target.separator)
