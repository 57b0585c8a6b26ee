"""CLI subcommands for reqlint."""
