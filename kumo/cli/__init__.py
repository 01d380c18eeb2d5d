"""CLI commands for Kumo.

This package provides the command-line interface for Kumo: config
bootstrapping and the Ichimoku calculation commands.
"""

from kumo.cli.main import cli, main

__all__ = ["cli", "main"]
