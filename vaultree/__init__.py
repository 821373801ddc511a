"""Vaultree - compact file tree summaries of a note vault for AI agents."""

__version__ = "0.1.0"
