"""
Infrastructure config package.

File-backed credential configuration.
"""

from regcreds.infrastructure.config.repository import Config

__all__ = ["Config"]
