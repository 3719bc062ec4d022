"""Terminal output for CLI commands."""
