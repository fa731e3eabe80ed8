"""
Infrastructure layer package.

Contains all I/O:
- Credential file loading (config/)
- Logging setup
"""

from regcreds.infrastructure.config import Config
from regcreds.infrastructure.logging_config import setup_logging

__all__ = [
    "Config",
    "setup_logging",
]
