"""Authentication components for the Slack Web API client.

This module provides:
- Bot token / user session credential resolution from the environment
- Credential masking for safe logging

Example:
    ```python
    from slack_client_auth.auth import CredentialResolver, mask_credential

    resolver = CredentialResolver()
    credential = resolver.resolve()
    print(credential.type, mask_credential(credential.token))
    ```
"""

from slack_client_auth.auth.credentials import (
    AuthType,
    BotCredential,
    Credential,
    CredentialResolver,
    UserCredential,
)
from slack_client_auth.auth.exceptions import (
    MISSING_COOKIE,
    NO_AUTH_CONFIGURED,
    SEARCH_REQUIRES_USER_TOKEN,
    CredentialError,
    MissingCredentialError,
    SearchUnavailableError,
    ValidationError,
)
from slack_client_auth.auth.masking import mask_credential

__all__ = [
    "MISSING_COOKIE",
    "NO_AUTH_CONFIGURED",
    "SEARCH_REQUIRES_USER_TOKEN",
    "AuthType",
    "BotCredential",
    "Credential",
    "CredentialError",
    "CredentialResolver",
    "MissingCredentialError",
    "SearchUnavailableError",
    "UserCredential",
    "ValidationError",
    "mask_credential",
]
