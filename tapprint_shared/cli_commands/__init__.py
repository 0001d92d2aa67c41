"""Subcommands for the tapprint-contracts CLI."""
