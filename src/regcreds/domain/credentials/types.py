"""
Type aliases for the credentials domain.
"""

from typing import Dict

from .credential import Credential

# Server address -> credential
Credentials = Dict[str, Credential]

__all__ = ["Credentials"]
