"""
Dependency container for command-line use.

Builds the FileStore on first access so commands that fail on argument
parsing never touch the credential file.
"""

import logging
from pathlib import Path
from typing import Optional

from .file_store import FileStore

logger = logging.getLogger(__name__)


class Container:
    """
    Dependency container.

    Holds the resolved credential file path and the lazily created store.
    """

    def __init__(self, config_path: Optional[Path] = None, disable_put: bool = True):
        """
        Initialize the container.

        Args:
            config_path: Credential file. Defaults to 'config.json' in the current directory.
            disable_put: Write policy for the store; the CLI never writes, so this defaults to True
        """
        self.config_path = config_path or Path.cwd() / "config.json"
        self.disable_put = disable_put
        self._file_store: Optional[FileStore] = None

    @property
    def file_store(self) -> FileStore:
        """Get the credential store, loading the file on first use."""
        if self._file_store is None:
            logger.debug("Loading credential store from %s", self.config_path)
            self._file_store = FileStore.from_path(self.config_path, disable_put=self.disable_put)
        return self._file_store
