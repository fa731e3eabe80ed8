"""
Error taxonomy for the credential store.

Every error raised by regcreds derives from CredentialStoreError, and also
from the builtin exception closest to its meaning so callers that only know
the builtins can still handle it.
"""

from __future__ import annotations

import os
from typing import Union


class CredentialStoreError(Exception):
    """Base class for all credential store errors."""


class ConfigLoadingError(CredentialStoreError):
    """
    Raised when a credential file cannot be read or parsed.

    Attributes:
        path: The file that failed to load
        cause: The underlying exception
    """

    def __init__(self, message: str, path: Union[str, os.PathLike], cause: BaseException | None = None):
        super().__init__(message)
        self.path = os.fspath(path)
        self.cause = cause


class PutDisabledError(CredentialStoreError, PermissionError):
    """Raised by put() on a store whose plaintext writes are disabled."""


class CredentialFormatError(CredentialStoreError, ValueError):
    """Raised by put() when a credential does not satisfy the storage format."""


class PreconditionError(CredentialStoreError, TypeError):
    """Raised when a required value (config, username, password) is None."""


# Short names used by registry clients
PolicyError = PutDisabledError
FormatError = CredentialFormatError
