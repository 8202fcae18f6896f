"""Command-line interface for casekit."""
