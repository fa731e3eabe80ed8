"""
Get Command Function - Credential Lookup

Resolves the credential stored for one server address.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from regcreds.application.container import Container
from regcreds.domain.credentials import ConfigLoadingError
from ..formatters import CredentialFormatter

logger = logging.getLogger(__name__)

console = Console(highlight=False)


def credential_get(
    server_address: str = typer.Argument(
        ...,
        help="Registry server address, e.g. registry.example.com."
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        envvar="REGCREDS_CONFIG",
        help="Credential file. Defaults to ./config.json."
    ),
    show_password: bool = typer.Option(
        False,
        "--show-password",
        help="Print the password in plain text."
    )
):
    """
    Show the credential stored for a server address.
    """
    container = Container(config)

    try:
        credential = container.file_store.get(server_address)
    except ConfigLoadingError as e:
        logger.error("Credential lookup failed: %s", e)
        console.print(f"[red]❌ Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if credential is None:
        console.print(f"[yellow]No credential stored for {escape(server_address)}[/yellow]")
        raise typer.Exit(1)

    CredentialFormatter(console).display_credential(server_address, credential, show_password)
