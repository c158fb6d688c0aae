"""Command-line interface for rotina."""
