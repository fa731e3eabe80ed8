"""
CLI package for regcreds.

Contains command-line interface components.
"""

from .cli import main

__all__ = ["main"]
