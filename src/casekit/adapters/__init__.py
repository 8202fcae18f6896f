"""Adapters for casekit.

Provide concrete implementations of the contracts in `casekit.interfaces`,
built on the text rules in `casekit.domain`.

Dependency rule: may import `casekit.domain`; the domain must not import this
package.
"""
