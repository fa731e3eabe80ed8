"""
Validate Command Function - Credential File Validation

Loads a credential file and reports every entry that the store would
refuse to accept through put().
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from regcreds.application.container import Container
from regcreds.application.file_store import validate_credential_format
from regcreds.domain.credentials import ConfigLoadingError, CredentialFormatError
from ..formatters import ValidationResultFormatter

logger = logging.getLogger(__name__)

console = Console(highlight=False)


def config_validate(
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        envvar="REGCREDS_CONFIG",
        help="Credential file. Defaults to ./config.json."
    )
):
    """
    Validate a credential file.

    Checks that the file parses as a map of server addresses to
    username/password objects, and that no username contains a colon.
    """
    container = Container(config)

    try:
        store = container.file_store
    except ConfigLoadingError as e:
        logger.error("Config validation failed: %s", e)
        console.print(f"[red]❌ Error:[/red] {escape(str(e))}")
        if e.cause is not None:
            console.print(f"  cause: {escape(str(e.cause))}")
        raise typer.Exit(1)

    addresses = store.server_addresses()
    errors = []
    for server_address in addresses:
        credential = store.get(server_address)
        if credential is None:
            continue
        try:
            validate_credential_format(credential)
        except CredentialFormatError as e:
            errors.append(f"{server_address}: {e}")

    ValidationResultFormatter(console).display_validation_results(errors, len(addresses))

    if errors:
        raise typer.Exit(1)
