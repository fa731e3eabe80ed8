"""
Application layer package.

The caller-facing credential store and its wiring.
"""

from regcreds.application.file_store import (
    ERR_BAD_CREDENTIAL_FORMAT,
    ERR_PLAINTEXT_PUT_DISABLED,
    FileStore,
    new_file_store,
    validate_credential_format,
)

__all__ = [
    "ERR_BAD_CREDENTIAL_FORMAT",
    "ERR_PLAINTEXT_PUT_DISABLED",
    "FileStore",
    "new_file_store",
    "validate_credential_format",
]
