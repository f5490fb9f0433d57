"""Command-line entry points for the selection engine."""
