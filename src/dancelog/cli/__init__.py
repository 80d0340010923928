"""Command-line interface for dancelog."""
