"""
Command line interface for delimlog.
"""

from delimlog.cli.main import cli

__all__ = ["cli"]
