"""
Command-line interface for bank-account.

Provides commands for running the builder demo and building
accounts from command-line options.
"""

from .main import app, main

__all__ = ["main", "app"]
