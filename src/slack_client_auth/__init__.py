"""Slack Client Auth - credential resolution for Slack Web API clients.

This library resolves Slack credentials from the environment and hands out a
configured ``slack_sdk.WebClient``:
- Bot token or user session token (+ ``d`` cookie) authentication
- Lazily built, resettable client singleton
- Credential masking for safe logging

Example:
    ```python
    from slack_client_auth import get_slack_client, is_search_available

    client = get_slack_client()
    if is_search_available():
        client.search_messages(query="incident")
    ```
"""

from slack_client_auth.client import (
    SlackClientProvider,
    get_auth_type,
    get_slack_client,
    is_search_available,
    require_search,
    reset_slack_client,
    resolve_auth_config,
)

__version__ = "0.1.0"

__all__ = [
    "SlackClientProvider",
    "__version__",
    "get_auth_type",
    "get_slack_client",
    "is_search_available",
    "require_search",
    "reset_slack_client",
    "resolve_auth_config",
]
