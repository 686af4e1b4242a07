"""Subcommand implementations registered by ``yetzira.cli.app``."""
