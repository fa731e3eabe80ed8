"""
Credential configuration backed by a plaintext JSON file.

The file follows the container tooling "config.json" convention: a top-level
object mapping server addresses to {"username": ..., "password": ...}.

Reference: https://docs.docker.com/engine/reference/commandline/cli/#docker-cli-configuration-file-configjson-properties
"""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Mapping, Optional, Union

from pydantic import ValidationError

from regcreds.domain.credentials import ConfigLoadingError, Credential, Credentials, PreconditionError

logger = logging.getLogger(__name__)


class Config:
    """
    In-memory credential map seeded from a file.

    Each operation takes the instance lock, so get/put/delete are individually
    atomic across threads. Changes are never written back to the source file.
    """

    def __init__(self, credentials: Optional[Mapping[str, Credential]] = None,
                 source_path: Optional[Path] = None):
        """
        Initialize the config.

        Args:
            credentials: Initial entries, copied into the store
            source_path: File the entries were loaded from, if any
        """
        self._lock = threading.Lock()
        self._credentials: Credentials = dict(credentials or {})
        self._source_path = source_path

    @classmethod
    def load(cls, config_path: Union[str, os.PathLike]) -> Config:
        """
        Load configuration from a JSON file and populate the credential store.

        Args:
            config_path: Path to the JSON configuration file

        Returns:
            A Config instance holding every entry of the file

        Raises:
            ConfigLoadingError: If the file cannot be read or parsed
        """
        path = Path(config_path)

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, ValueError) as e:
            raise ConfigLoadingError(
                f"Failed to read the configuration file: {path}", path, e
            ) from e

        try:
            data = json.loads(content)
        except (ValueError, RecursionError) as e:
            raise ConfigLoadingError(
                f"Failed to parse the configuration file: {path}", path, e
            ) from e

        if not isinstance(data, dict):
            cause = TypeError(f"expected a JSON object, got {type(data).__name__}")
            raise ConfigLoadingError(
                f"Failed to parse the configuration file: {path}: {cause}", path, cause
            ) from cause

        credentials: Credentials = {}
        for server_address, cred_data in data.items():
            try:
                credentials[server_address] = Credential.model_validate(cred_data)
            except (ValidationError, PreconditionError) as e:
                raise ConfigLoadingError(
                    f"Invalid credential for '{server_address}' in {path}", path, e
                ) from e

        logger.debug("Loaded %d credential(s) from %s", len(credentials), path)
        return cls(credentials, source_path=path)

    @property
    def source_path(self) -> Optional[Path]:
        """File this config was loaded from; None for in-memory configs."""
        return self._source_path

    def get_credential(self, server_address: str) -> Optional[Credential]:
        """Return the credential for server_address, or None if absent."""
        with self._lock:
            return self._credentials.get(server_address)

    def put_credential(self, server_address: str, credential: Credential) -> None:
        """Insert or overwrite the credential for server_address."""
        with self._lock:
            self._credentials[server_address] = credential

    def delete_credential(self, server_address: str) -> None:
        """Remove the credential for server_address; absent keys are ignored."""
        with self._lock:
            self._credentials.pop(server_address, None)

    def server_addresses(self) -> list[str]:
        """Sorted snapshot of the stored server addresses."""
        with self._lock:
            return sorted(self._credentials)

    def __len__(self) -> int:
        with self._lock:
            return len(self._credentials)

    def __contains__(self, server_address: object) -> bool:
        with self._lock:
            return server_address in self._credentials

    def __repr__(self) -> str:
        return f"Config(entries={len(self)}, source_path={self._source_path!r})"
