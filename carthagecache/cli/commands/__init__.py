"""Subcommand implementations for the carthage-cache CLI."""
