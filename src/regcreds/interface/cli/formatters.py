"""
Result formatters for CLI commands.

Provides formatting and display logic for command results.
"""

from rich.console import Console
from rich.markup import escape

from regcreds.domain.credentials import Credential

MASK = "********"


class CredentialFormatter:
    """
    Formatter for a single resolved credential.
    """

    def __init__(self, console: Console):
        self.console = console

    def display_credential(self, server_address: str, credential: Credential, show_password: bool) -> None:
        """
        Display a credential to the user.

        Args:
            server_address: Address the credential was resolved for
            credential: The resolved credential
            show_password: Print the plain password instead of a mask
        """
        password = credential.get_password() if show_password else MASK
        self.console.print(f"[bold]{escape(server_address)}[/bold]")
        self.console.print(f"  username: {escape(credential.username)}")
        self.console.print(f"  password: {escape(password)}")


class ValidationResultFormatter:
    """
    Formatter for credential file validation results.
    """

    def __init__(self, console: Console):
        self.console = console

    def display_validation_results(self, errors: list[str], total: int) -> None:
        """
        Display validation results to the user.

        Args:
            errors: List of validation error messages
            total: Number of entries checked
        """
        if not errors:
            self.console.print(f"[green]✅ All {total} credential(s) are valid[/green]")
            return

        self.console.print(
            f"[red]❌ Credential validation failed with {len(errors)} error(s) "
            f"out of {total} credential(s):[/red]"
        )
        for i, error in enumerate(errors, 1):
            self.console.print(f"  {i}. {escape(error)}")
