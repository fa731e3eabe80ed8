"""
CLI command functions.
"""

from .get import credential_get
from .validate import config_validate

__all__ = ["config_validate", "credential_get"]
