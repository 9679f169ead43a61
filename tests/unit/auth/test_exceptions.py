"""Tests for credential resolution exceptions."""

import pytest

from slack_client_auth.auth.exceptions import (
    MISSING_COOKIE,
    NO_AUTH_CONFIGURED,
    SEARCH_REQUIRES_USER_TOKEN,
    CredentialError,
    MissingCredentialError,
    SearchUnavailableError,
    ValidationError,
)


class TestCredentialError:
    """Test CredentialError base exception."""

    def test_can_be_raised(self):
        """Test that CredentialError can be raised."""
        with pytest.raises(CredentialError):
            raise CredentialError("Test error")

    def test_exception_message(self):
        """Test that exception message is preserved."""
        try:
            raise CredentialError("Custom error message")
        except CredentialError as e:
            assert str(e) == "Custom error message"


class TestMissingCredentialError:
    """Test MissingCredentialError exception."""

    def test_is_credential_error(self):
        """Test that MissingCredentialError is a CredentialError."""
        with pytest.raises(CredentialError):
            raise MissingCredentialError(NO_AUTH_CONFIGURED)

    def test_message_is_verbatim(self):
        """Test that the constant message is not decorated."""
        with pytest.raises(MissingCredentialError) as exc_info:
            raise MissingCredentialError(MISSING_COOKIE, env_var_name="SLACK_COOKIE_D")

        assert str(exc_info.value) == MISSING_COOKIE
        assert exc_info.value.env_var_name == "SLACK_COOKIE_D"

    def test_env_var_name_optional(self):
        """Test that env_var_name is optional."""
        try:
            raise MissingCredentialError(NO_AUTH_CONFIGURED)
        except MissingCredentialError as e:
            assert e.env_var_name is None


class TestValidationError:
    """Test ValidationError exception."""

    def test_is_credential_error(self):
        """Test that ValidationError is a CredentialError."""
        with pytest.raises(CredentialError):
            raise ValidationError("bad token", env_var_name="SLACK_USER_TOKEN")

    def test_is_not_missing_credential_error(self):
        """Test that a malformed value is distinguishable from a missing one."""
        assert not issubclass(ValidationError, MissingCredentialError)


class TestSearchUnavailableError:
    """Test SearchUnavailableError exception."""

    def test_default_message(self):
        """Test that the default message explains how to enable search."""
        error = SearchUnavailableError()

        assert str(error) == SEARCH_REQUIRES_USER_TOKEN
        assert isinstance(error, CredentialError)


class TestMessages:
    """Test operator-facing message constants."""

    def test_no_auth_configured_names_every_variable(self):
        """Test that the message names every credential variable."""
        for name in ("SLACK_BOT_TOKEN", "SLACK_USER_TOKEN", "SLACK_COOKIE_D"):
            assert name in NO_AUTH_CONFIGURED

    def test_missing_cookie_names_cookie_variable(self):
        """Test that the message names the cookie variable first."""
        assert MISSING_COOKIE.startswith("SLACK_COOKIE_D is required")
