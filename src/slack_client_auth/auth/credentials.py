"""Slack credential resolution from environment variables.

Two mutually exclusive authentication schemes are supported:

- Bot token authentication (``SLACK_BOT_TOKEN``)
- User session authentication (``SLACK_USER_TOKEN`` starting with ``xoxc-``
  plus the ``d`` session cookie in ``SLACK_COOKIE_D``)

Resolution order (first match wins):
1. ``SLACK_BOT_TOKEN``, kept first for backward compatibility with bot-only setups
2. ``SLACK_USER_TOKEN`` + ``SLACK_COOKIE_D``
3. Error if neither is configured

Example:
    ```python
    from slack_client_auth.auth import AuthType, CredentialResolver

    # Initialize resolver (loads .env file by default)
    resolver = CredentialResolver()

    credential = resolver.resolve()
    if credential.type is AuthType.USER:
        print(f"Using session cookie {credential!r}")
    ```

Security Considerations:
    - Credentials are never logged in full (see ``mask_credential``)
    - Credential reprs are masked as well
    - Thread-safe dotenv loading with lock
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from threading import Lock

from dotenv import load_dotenv

from slack_client_auth.auth.exceptions import (
    MISSING_COOKIE,
    NO_AUTH_CONFIGURED,
    MissingCredentialError,
    ValidationError,
)
from slack_client_auth.auth.masking import mask_credential

logger = logging.getLogger(__name__)

BOT_TOKEN_ENV = "SLACK_BOT_TOKEN"
USER_TOKEN_ENV = "SLACK_USER_TOKEN"
COOKIE_ENV = "SLACK_COOKIE_D"

USER_TOKEN_PREFIX = "xoxc-"


class AuthType(StrEnum):
    """Authentication method in use."""

    BOT = "bot"
    USER = "user"


@dataclass(frozen=True)
class BotCredential:
    """Slack bot token (usually ``xoxb-*``)."""

    token: str

    @property
    def type(self) -> AuthType:
        return AuthType.BOT

    def __repr__(self) -> str:
        return f"BotCredential(token={mask_credential(self.token)!r})"


@dataclass(frozen=True)
class UserCredential:
    """Slack user session token (``xoxc-*``) and its ``d`` cookie."""

    token: str
    cookie: str

    @property
    def type(self) -> AuthType:
        return AuthType.USER

    def __repr__(self) -> str:
        return f"UserCredential(token={mask_credential(self.token)!r}, cookie={mask_credential(self.cookie)!r})"


Credential = BotCredential | UserCredential


class CredentialResolver:
    """Resolve Slack credentials from the environment.

    The resolver itself keeps no credential state: every call to ``resolve``
    reads the environment again. Memoization belongs to
    ``SlackClientProvider``, which owns the resolved credential together
    with the client built from it.

    Attributes:
        _dotenv_loaded: Whether .env file has been loaded.
        _dotenv_lock: Thread lock for safe dotenv loading.

    Example:
        ```python
        # Read from an explicit mapping instead of os.environ
        resolver = CredentialResolver(load_dotenv=False, environ={"SLACK_BOT_TOKEN": "xoxb-1"})
        resolver.resolve()  # BotCredential(token='***')
        ```
    """

    def __init__(
        self,
        dotenv_path: str | None = None,
        load_dotenv: bool = True,
        environ: Mapping[str, str] | None = None,
    ):
        """Initialize credential resolver.

        Args:
            dotenv_path: Path to .env file. If None, searches parent directories
                for .env file (default behavior of python-dotenv).
            load_dotenv: Whether to load .env file into ``os.environ``.
                Variables that are already set are never overridden.
                Default is True.
            environ: Mapping to read variables from. Defaults to ``os.environ``,
                looked up at resolution time.
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv
        self._environ = environ

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        """Ensure .env file is loaded once (thread-safe)."""
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path, override=False)
                logger.debug("Loaded .env file for credential resolution")
            except Exception as e:
                # Don't fail - continue without .env
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def _read(self, env_var_name: str) -> str | None:
        """Read a single variable, treating an empty value as unset."""
        environ = os.environ if self._environ is None else self._environ
        value = environ.get(env_var_name) or None
        if value is not None:
            logger.debug(f"Read environment variable '{env_var_name}': {mask_credential(value)}")
        return value

    def resolve(self) -> Credential:
        """Resolve the active Slack credential.

        Returns:
            ``BotCredential`` when ``SLACK_BOT_TOKEN`` is set, otherwise
            ``UserCredential`` when ``SLACK_USER_TOKEN`` and ``SLACK_COOKIE_D``
            are both set.

        Raises:
            ValidationError: If ``SLACK_USER_TOKEN`` does not start with ``xoxc-``.
            MissingCredentialError: If ``SLACK_USER_TOKEN`` is set without
                ``SLACK_COOKIE_D``, or if nothing is configured.
        """
        # The bot token is accepted as-is, no prefix check
        bot_token = self._read(BOT_TOKEN_ENV)
        if bot_token is not None:
            logger.debug(f"Using bot token authentication from '{BOT_TOKEN_ENV}'")
            return BotCredential(token=bot_token)

        user_token = self._read(USER_TOKEN_ENV)
        if user_token is not None:
            if not user_token.startswith(USER_TOKEN_PREFIX):
                raise ValidationError(
                    f"User token must start with '{USER_TOKEN_PREFIX}'. "
                    "Please provide a valid Slack user session token.",
                    env_var_name=USER_TOKEN_ENV,
                )

            cookie = self._read(COOKIE_ENV)
            if cookie is None:
                raise MissingCredentialError(MISSING_COOKIE, env_var_name=COOKIE_ENV)

            logger.debug(f"Using user token authentication from '{USER_TOKEN_ENV}' and '{COOKIE_ENV}'")
            return UserCredential(token=user_token, cookie=cookie)

        raise MissingCredentialError(NO_AUTH_CONFIGURED)
