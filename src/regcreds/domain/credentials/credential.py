"""
Credential domain model.

This module defines the Credential value type: a username/password pair
associated with one server address.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationInfo, field_validator

from .errors import PreconditionError


class Credential(BaseModel):
    """
    Domain model for a registry login.

    The password is held as a SecretStr so it never shows up in reprs or logs.
    Username format rules are enforced by the store on write, not here:
    credentials read from disk are trusted as-is.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    username: str = Field(..., description="Registry username")
    password: SecretStr = Field(..., description="Registry password")

    @field_validator("username", "password", mode="before")
    @classmethod
    def require_value(cls, v: Any, info: ValidationInfo) -> Any:
        """Reject None before pydantic's own type checks run."""
        if v is None:
            raise PreconditionError(f"{info.field_name.capitalize()} cannot be null")
        return v

    @classmethod
    def of(cls, username: str, password: str) -> "Credential":
        """Build a credential from positional username and password."""
        return cls(username=username, password=password)

    def get_password(self) -> str:
        """Get the plain text password."""
        return self.password.get_secret_value()  # pylint: disable=no-member
