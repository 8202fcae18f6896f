"""CLI helpers for casekit.

Utilities used by the command-line interface: parsing of NAME=LEVEL logger
overrides and a warning emitter that writes to stderr with an emoji→ASCII
fallback.
"""

from .log_level_parser import parse_log_level
from .messages import warn

__all__ = ["parse_log_level", "warn"]
