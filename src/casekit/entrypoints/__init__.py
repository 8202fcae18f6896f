"""Entrypoints (inbound adapters) for casekit.

Expose the converters to the outside world through the command line. Parse
and validate inputs, obtain a converter from `casekit.bootstrap`, and present
results.

Dependency rule: may import `casekit.bootstrap` and `casekit.config`; avoid
importing `casekit.adapters` directly.
"""
