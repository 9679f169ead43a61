"""Custom exceptions for Slack credential resolution.

This module defines the exceptions raised while resolving Slack credentials,
together with the operator-facing messages they carry. The messages are
module-level constants so callers can match on the exact text.

Example:
    ```python
    from slack_client_auth.auth.exceptions import MISSING_COOKIE, MissingCredentialError

    if not cookie:
        raise MissingCredentialError(MISSING_COOKIE, env_var_name="SLACK_COOKIE_D")
    ```
"""

NO_AUTH_CONFIGURED = (
    "No authentication configured. "
    "Set SLACK_BOT_TOKEN for bot authentication, or both "
    "SLACK_USER_TOKEN and SLACK_COOKIE_D for user token authentication."
)

MISSING_COOKIE = (
    "SLACK_COOKIE_D is required when using SLACK_USER_TOKEN. "
    "User token authentication requires both the token and the session cookie."
)

SEARCH_REQUIRES_USER_TOKEN = (
    "Search requires user token authentication. "
    "Configure SLACK_USER_TOKEN and SLACK_COOKIE_D to enable search functionality."
)


class CredentialError(Exception):
    """Base exception for credential-related errors.

    All credential-specific exceptions inherit from this class,
    making it easy to catch any credential-related error.
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        """Initialize CredentialError.

        Args:
            message: Operator-facing error message.
            env_var_name: Optional environment variable name for reference.
        """
        super().__init__(message)
        self.env_var_name = env_var_name


class MissingCredentialError(CredentialError):
    """Raised when required Slack credentials are not configured.

    The message is always one of ``NO_AUTH_CONFIGURED`` or ``MISSING_COOKIE``.

    Example:
        ```python
        try:
            client = get_slack_client()
        except MissingCredentialError as e:
            print(f"Missing credential: {e.env_var_name}")
        ```
    """

    pass


class ValidationError(CredentialError):
    """Raised when a configured credential has the wrong format."""

    pass


class SearchUnavailableError(CredentialError):
    """Raised when search is requested without user token authentication."""

    def __init__(self, message: str = SEARCH_REQUIRES_USER_TOKEN, env_var_name: str | None = None):
        super().__init__(message, env_var_name=env_var_name)
