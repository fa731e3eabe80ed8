"""
Tests for the Credential domain model and the error taxonomy.
"""

import pytest
from pydantic import SecretStr, ValidationError

from regcreds.domain.credentials import (
    ConfigLoadingError,
    Credential,
    CredentialFormatError,
    CredentialStoreError,
    FormatError,
    PolicyError,
    PreconditionError,
    PutDisabledError,
)


class TestCredential:
    """Test cases for Credential domain model."""

    def test_valid_credential_creation(self):
        """Test creating a valid credential."""
        credential = Credential(username="alice", password="s3cr3t")

        assert credential.username == "alice"
        assert credential.get_password() == "s3cr3t"
        assert isinstance(credential.password, SecretStr)

    def test_positional_factory(self):
        """Test Credential.of builds the same value as keyword construction."""
        assert Credential.of("alice", "s3cr3t") == Credential(username="alice", password="s3cr3t")

    def test_password_masked_in_repr(self):
        """The plain password must not leak through repr or str."""
        credential = Credential.of("alice", "s3cr3t")

        assert "s3cr3t" not in repr(credential)
        assert "s3cr3t" not in str(credential)

    def test_equality_compares_secret_value(self):
        """Credentials with different passwords are not equal."""
        assert Credential.of("alice", "one") != Credential.of("alice", "two")
        assert Credential.of("alice", "one") != Credential.of("bob", "one")

    def test_credential_is_frozen(self):
        """Credentials are immutable after construction."""
        credential = Credential.of("alice", "s3cr3t")

        with pytest.raises(ValidationError):
            credential.username = "mallory"

    def test_credential_is_hashable(self):
        """Frozen credentials can be used in sets."""
        assert len({Credential.of("alice", "pw"), Credential.of("alice", "pw")}) == 1

    def test_colon_username_allowed_by_model(self):
        """The colon rule belongs to the store, not the model."""
        credential = Credential.of("user:name", "pw")
        assert credential.username == "user:name"

    def test_empty_values_allowed(self):
        """Empty strings are not null and are accepted."""
        credential = Credential.of("", "")
        assert credential.username == ""
        assert credential.get_password() == ""

    def test_none_username_raises_precondition_error(self):
        """A null username is a precondition violation."""
        with pytest.raises(PreconditionError, match="Username cannot be null"):
            Credential(username=None, password="pw")

    def test_none_password_raises_precondition_error(self):
        """A null password is a precondition violation."""
        with pytest.raises(PreconditionError, match="Password cannot be null"):
            Credential(username="alice", password=None)

    def test_missing_field_raises_validation_error(self):
        """Both fields are required."""
        with pytest.raises(ValidationError):
            Credential(username="alice")

    def test_wrong_type_raises_validation_error(self):
        """Non-string usernames are rejected."""
        with pytest.raises(ValidationError):
            Credential(username=42, password="pw")

    def test_extra_fields_rejected(self):
        """Only username and password are recognized."""
        with pytest.raises(ValidationError):
            Credential(username="alice", password="pw", auth="YWxpY2U6cHc=")


class TestErrors:
    """Test cases for the error hierarchy."""

    def test_all_errors_share_base(self):
        """Every store error derives from CredentialStoreError."""
        for error_type in (ConfigLoadingError, PutDisabledError, CredentialFormatError, PreconditionError):
            assert issubclass(error_type, CredentialStoreError)

    def test_builtin_bases(self):
        """Store errors are also catchable as the closest builtin."""
        assert issubclass(PutDisabledError, PermissionError)
        assert issubclass(CredentialFormatError, ValueError)
        assert issubclass(PreconditionError, TypeError)

    def test_short_aliases(self):
        """PolicyError and FormatError name the same classes."""
        assert PolicyError is PutDisabledError
        assert FormatError is CredentialFormatError

    def test_config_loading_error_carries_path_and_cause(self, tmp_path):
        """ConfigLoadingError keeps the offending path and the cause."""
        cause = FileNotFoundError("missing")
        error = ConfigLoadingError("boom", tmp_path / "config.json", cause)

        assert error.path == str(tmp_path / "config.json")
        assert error.cause is cause
        assert str(error) == "boom"
