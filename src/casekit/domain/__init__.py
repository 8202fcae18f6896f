"""Domain layer for casekit.

Contains the text rules shared by every conversion: input validation,
cleaning, word segmentation and word joining. This package is deliberately
free of framework code.

Dependency rule: do not import from `casekit.adapters` or `casekit.entrypoints`.
"""
