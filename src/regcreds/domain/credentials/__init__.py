"""
Credentials domain package.

This package contains the credential model and the store's error taxonomy.
"""

from .credential import Credential
from .errors import (
    ConfigLoadingError,
    CredentialFormatError,
    CredentialStoreError,
    FormatError,
    PolicyError,
    PreconditionError,
    PutDisabledError,
)
from .types import Credentials

__all__ = [
    "ConfigLoadingError",
    "Credential",
    "CredentialFormatError",
    "CredentialStoreError",
    "Credentials",
    "FormatError",
    "PolicyError",
    "PreconditionError",
    "PutDisabledError",
]
