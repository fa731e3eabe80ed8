"""
Plaintext file-backed credential store.

FileStore is the caller-facing surface: it applies the write-disable policy
and the credential format rules before delegating to its Config.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

from regcreds.domain.credentials import (
    Credential,
    CredentialFormatError,
    PreconditionError,
    PutDisabledError,
)
from regcreds.infrastructure.config import Config

logger = logging.getLogger(__name__)

ERR_PLAINTEXT_PUT_DISABLED = "Putting plaintext credentials is disabled"
ERR_BAD_CREDENTIAL_FORMAT = "Bad credential format"


def validate_credential_format(credential: Credential) -> None:
    """
    Check that a credential can be stored.

    Raises:
        CredentialFormatError: If the username contains a colon
    """
    if ":" in credential.username:
        raise CredentialFormatError(
            f"{ERR_BAD_CREDENTIAL_FORMAT}: colons(:) are not allowed in username"
        )


class FileStore:
    """
    Credential store keeping credentials in a plaintext configuration file.

    Mutations only change the in-memory map; the file is never rewritten.
    """

    def __init__(self, disable_put: bool, config: Config):
        """
        Initialize the store.

        Args:
            disable_put: Reject every put() when True
            config: Config instance owned by this store

        Raises:
            PreconditionError: If config is None
        """
        if config is None:
            raise PreconditionError("Config cannot be null")
        self._disable_put = bool(disable_put)
        self._config = config

    @classmethod
    def from_path(cls, config_path: Union[str, os.PathLike], disable_put: bool = False) -> FileStore:
        """Load config_path and wrap it in a new store."""
        return cls(disable_put, Config.load(config_path))

    @property
    def disable_put(self) -> bool:
        return self._disable_put

    def get(self, server_address: str) -> Optional[Credential]:
        """Retrieve the credential for server_address, or None."""
        return self._config.get_credential(server_address)

    def put(self, server_address: str, credential: Credential) -> None:
        """
        Save the credential for server_address, replacing any existing one.

        Raises:
            PutDisabledError: If plaintext puts are disabled on this store
            PreconditionError: If credential is not a Credential
            CredentialFormatError: If the username contains a colon
        """
        if self._disable_put:
            raise PutDisabledError(ERR_PLAINTEXT_PUT_DISABLED)
        if not isinstance(credential, Credential):
            raise PreconditionError(
                f"Credential must be a Credential, got {type(credential).__name__}"
            )
        validate_credential_format(credential)
        self._config.put_credential(server_address, credential)
        logger.debug("Stored credential for %s", server_address)

    def delete(self, server_address: str) -> None:
        """Delete the credential for server_address. Allowed even when puts are disabled."""
        self._config.delete_credential(server_address)
        logger.debug("Deleted credential for %s", server_address)

    def server_addresses(self) -> list[str]:
        return self._config.server_addresses()

    def __repr__(self) -> str:
        return f"FileStore(disable_put={self._disable_put}, config={self._config!r})"


def new_file_store(config_path: Union[str, os.PathLike]) -> FileStore:
    """
    Create a writable FileStore from the given configuration file.

    Raises:
        ConfigLoadingError: If the file cannot be read or parsed
    """
    return FileStore.from_path(config_path)
