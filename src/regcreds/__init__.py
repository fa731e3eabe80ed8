"""
regcreds - Plaintext registry credential store.

Resolves the username/password to use for a registry server address from a
container-tooling style config.json.

Usage:
    # CLI
    regcreds get registry.example.com --config ~/.regcreds/config.json

    # Programmatic
    from regcreds import Credential, new_file_store

    store = new_file_store("config.json")
    credential = store.get("registry.example.com")
"""

__version__ = "0.1.0"

from regcreds.application.file_store import FileStore, new_file_store
from regcreds.domain.credentials import (
    ConfigLoadingError,
    Credential,
    CredentialFormatError,
    CredentialStoreError,
    FormatError,
    PolicyError,
    PreconditionError,
    PutDisabledError,
)
from regcreds.infrastructure.config import Config

__all__ = [
    "Config",
    "ConfigLoadingError",
    "Credential",
    "CredentialFormatError",
    "CredentialStoreError",
    "FileStore",
    "FormatError",
    "PolicyError",
    "PreconditionError",
    "PutDisabledError",
    "new_file_store",
    "__version__",
]
