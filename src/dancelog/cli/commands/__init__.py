"""dancelog CLI commands."""
