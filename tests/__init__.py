"""casekit test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Shared behavior/invariants enforced across every CaseConverter.
- e2e/          : The ``casekit`` command line driven through Click's CliRunner.

General guidance
- Keep unit fast and deterministic (no real I/O).
- Contract parametrizes implementations to ensure consistent behavior.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, contract, e2e, property
"""
