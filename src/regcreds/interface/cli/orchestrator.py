"""
CLI Orchestrator - Main Entry Point

Wires the command functions into one typer application.
"""

import logging
from typing import Optional

import typer

from regcreds.infrastructure.logging_config import setup_logging
from .commands import config_validate, credential_get

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="regcreds",
    help="🔐 Plaintext registry credential store",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True
)

app.command("get")(credential_get)
app.command("validate")(config_validate)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging."
    ),
    log_file: Optional[str] = typer.Option(
        None,
        "--log-file",
        help="Also write a full debug log to this file."
    )
):
    """
    🔐 regcreds - resolve registry credentials from a config.json file.

    The file maps server addresses to {"username": ..., "password": ...}
    objects, as container tooling does.
    """
    setup_logging(logging.DEBUG if verbose else logging.WARNING, log_file)
