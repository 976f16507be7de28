"""API key authentication for the HTTP transport."""

from __future__ import annotations

import hmac
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Literal, Protocol

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "

NO_KEY_MESSAGE = (
    "No API key provided. Include your API key in the Authorization header "
    "(Bearer token) or x-api-key header."
)
INVALID_KEY_MESSAGE = (
    "Invalid API key. Sign up at https://uswdsmcp.com to get your API key."
)
BLOCKED_MESSAGE = "Your account has been blocked. Contact support for assistance."
SUSPENDED_MESSAGE = "Your account has been suspended. Contact support for assistance."
UNAVAILABLE_MESSAGE = (
    "Authentication service temporarily unavailable. Please try again."
)


class User(BaseModel):
    """Account that owns an API key."""

    model_config = ConfigDict(frozen=True)

    email: str
    api_key: str
    tier: Literal["free", "pro", "enterprise"] = "free"
    status: Literal["active", "blocked", "suspended"] = "active"
    is_admin: bool = False
    created_at: str = ""
    updated_at: str = ""
    request_count: int = 0
    last_request_at: str | None = None


class UserStore(Protocol):
    """Lookup of users by API key."""

    async def get_user_by_api_key(self, api_key: str) -> User | None:
        """Return the user owning ``api_key``, or ``None``."""
        ...


class InMemoryUserStore:
    """User store backed by a dictionary."""

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._users = {user.api_key: user for user in users}

    def add(self, user: User) -> None:
        self._users[user.api_key] = user

    async def get_user_by_api_key(self, api_key: str) -> User | None:
        return self._users.get(api_key)


class StaticKeyUserStore:
    """Accept exactly one configured API key.

    Used when the server is deployed with a single shared ``API_KEY`` instead
    of a user database.
    """

    def __init__(self, api_key: str, email: str = "api-key@localhost") -> None:
        self._user = User(email=email, api_key=api_key, tier="pro")

    async def get_user_by_api_key(self, api_key: str) -> User | None:
        if hmac.compare_digest(api_key.encode(), self._user.api_key.encode()):
            return self._user
        return None


@dataclass(frozen=True)
class AuthResult:
    """Outcome of :func:`authenticate`; ``error`` is set when rejected."""

    authenticated: bool
    user: User | None = None
    api_key: str | None = None
    error: str | None = None


def get_header(headers: Mapping[str, Any] | None, name: str) -> str | None:
    """Case-insensitive header lookup; empty values count as missing."""
    if not headers:
        return None
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted and value:
            return str(value)
    return None


def extract_api_key(event: Mapping[str, Any]) -> str | None:
    """Return the API key carried by a request, if any.

    A ``Bearer`` token in ``Authorization`` takes priority over ``x-api-key``.
    """
    headers = event.get("headers")
    authorization = get_header(headers, "authorization")
    if authorization and authorization.startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX) :]
        if token:
            return token
    return get_header(headers, "x-api-key")


def redact_key(api_key: str) -> str:
    """Shorten a key for log output."""
    return f"{api_key[:12]}..."


async def authenticate(event: Mapping[str, Any], store: UserStore) -> AuthResult:
    """Authenticate a request against ``store``.

    Every rejection, including a failing store, is returned as an
    unauthenticated :class:`AuthResult`; this function does not raise.
    """
    api_key = extract_api_key(event)
    if not api_key:
        return AuthResult(authenticated=False, error=NO_KEY_MESSAGE)

    try:
        user = await store.get_user_by_api_key(api_key)
    except Exception as error:
        logger.error("Authentication error: %r", error)
        return AuthResult(authenticated=False, error=UNAVAILABLE_MESSAGE)

    if user is None:
        logger.warning("Invalid API key: %s", redact_key(api_key))
        return AuthResult(authenticated=False, error=INVALID_KEY_MESSAGE)
    if user.status == "blocked":
        logger.warning("Blocked user attempted access: %s", user.email)
        return AuthResult(authenticated=False, error=BLOCKED_MESSAGE)
    if user.status == "suspended":
        logger.warning("Suspended user attempted access: %s", user.email)
        return AuthResult(authenticated=False, error=SUSPENDED_MESSAGE)

    logger.debug("Authentication successful: %s", user.email)
    return AuthResult(authenticated=True, user=user, api_key=api_key)
