"""CLI commands for devsync."""
