"""Slack Web API client accessor.

``SlackClientProvider`` owns the resolved credential and the ``WebClient``
built from it. Both are created lazily and cleared together by ``reset``.

The module-level functions delegate to a process-wide default provider:

Example:
    ```python
    from slack_client_auth.client import get_slack_client, is_search_available

    client = get_slack_client()
    client.chat_postMessage(channel="#general", text="hello")

    if is_search_available():
        client.search_messages(query="deploy")
    ```
"""

import logging

from slack_sdk import WebClient

from slack_client_auth.auth.credentials import AuthType, Credential, CredentialResolver, UserCredential
from slack_client_auth.auth.exceptions import SearchUnavailableError

logger = logging.getLogger(__name__)


class SlackClientProvider:
    """Lazily resolve credentials and build a single Slack ``WebClient``.

    Not thread-safe: callers are expected to use one provider from a single
    thread of control and call ``reset`` between test cases.

    Args:
        resolver: Credential resolver to use. Defaults to a
            ``CredentialResolver`` reading ``os.environ`` (and ``.env``).
    """

    def __init__(self, resolver: CredentialResolver | None = None) -> None:
        self._resolver = resolver or CredentialResolver()
        self._credential: Credential | None = None
        self._client: WebClient | None = None

    def resolve_auth_config(self) -> Credential:
        """Return the memoized credential, resolving it on first use.

        Raises:
            CredentialError: If resolution fails. Nothing is cached in that case.
        """
        if self._credential is None:
            self._credential = self._resolver.resolve()
        return self._credential

    def get_client(self) -> WebClient:
        """Return the memoized ``WebClient``, building it on first use.

        User credentials add a ``Cookie: d=<cookie>`` header to every request.
        """
        if self._client is None:
            credential = self.resolve_auth_config()

            if isinstance(credential, UserCredential):
                client = WebClient(token=credential.token, headers={"Cookie": f"d={credential.cookie}"})
            else:
                client = WebClient(token=credential.token)

            logger.debug(f"Created Slack WebClient with {credential.type} authentication")
            self._client = client
        return self._client

    def auth_type(self) -> AuthType:
        """Return the type of the active credential."""
        return self.resolve_auth_config().type

    def is_search_available(self) -> bool:
        """Search endpoints need user token auth; bot tokens lack the scope."""
        return self.auth_type() is AuthType.USER

    def require_search(self) -> None:
        """Raise ``SearchUnavailableError`` unless search is available."""
        if not self.is_search_available():
            raise SearchUnavailableError()

    def reset(self) -> None:
        """Forget the cached client and credential."""
        self._client = None
        self._credential = None
        logger.debug("Reset Slack client and cached credentials")


_default_provider: SlackClientProvider | None = None


def get_default_provider() -> SlackClientProvider:
    """Return the process-wide provider, creating it on first use."""
    global _default_provider
    if _default_provider is None:
        _default_provider = SlackClientProvider()
    return _default_provider


def resolve_auth_config() -> Credential:
    """Return the default provider's memoized credential."""
    return get_default_provider().resolve_auth_config()


def get_slack_client() -> WebClient:
    """Return the default provider's memoized Slack client."""
    return get_default_provider().get_client()


def get_auth_type() -> AuthType:
    """Return the auth type of the default provider's credential."""
    return get_default_provider().auth_type()


def is_search_available() -> bool:
    """Return True when the default provider uses user token auth."""
    return get_default_provider().is_search_available()


def require_search() -> None:
    """Raise SearchUnavailableError unless the default provider uses user token auth."""
    get_default_provider().require_search()


def reset_slack_client() -> None:
    """Reset the default provider's client and credential (for testing)."""
    if _default_provider is not None:
        _default_provider.reset()
