"""
cli - Command Line Interface for Schema Rename Preview
"""

from .cli_entry import main

__all__ = ["main"]
