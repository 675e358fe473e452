"""Subcommands of the studiobot CLI."""
