"""Interfaces (application boundary) for casekit.

Defines framework-free contracts shared by adapters and entrypoints: the
`CaseStyle` enumeration and the abstract `CaseConverter`. Text rules stay out
of this package.

Dependency rule: this package is independent; do not import from any
`casekit.*` modules. It may be imported by `casekit.adapters`,
`casekit.bootstrap` and `casekit.entrypoints`.
"""
