"""CLI subcommands for evlog."""
