"""Bootstrap (composition root) for casekit.

Assembles the concrete adapters behind the `casekit.interfaces` contracts.
The package root and the CLI obtain their converter here rather than
importing adapters directly.

Import rules:
- Entry points import *this* package (not adapters/interfaces/domain).
- This package may import: `casekit.adapters`, `casekit.interfaces`,
  `casekit.domain`, and `casekit.config`.
- Inner layers must not import `casekit.bootstrap`.
"""

from .bootstrap import default_converter

__all__ = ["default_converter"]
