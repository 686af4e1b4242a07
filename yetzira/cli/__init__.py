"""Yetzira CLI - Typer-based command-line interface.

Provides the ``yetzira`` command with one subcommand per dashboard tab,
plus data validation, store seeding and the Streamlit launcher.

All output uses Rich for formatted terminal display.
"""
