"""Command-line interface for leaderkey-config."""
