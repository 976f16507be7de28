"""Tests for API key authentication and origin checks."""

from __future__ import annotations

import pytest

from uswds_mcp_server.auth import (
    BLOCKED_MESSAGE,
    INVALID_KEY_MESSAGE,
    NO_KEY_MESSAGE,
    SUSPENDED_MESSAGE,
    UNAVAILABLE_MESSAGE,
    InMemoryUserStore,
    StaticKeyUserStore,
    User,
    authenticate,
    extract_api_key,
    get_header,
    redact_key,
)
from uswds_mcp_server.origin import is_stage_origin, validate_origin


class _BrokenStore:
    async def get_user_by_api_key(self, api_key: str) -> User | None:
        raise RuntimeError("table unavailable")


@pytest.fixture()
def store() -> InMemoryUserStore:
    return InMemoryUserStore(
        [
            User(email="ok@example.gov", api_key="key-ok"),
            User(email="blocked@example.gov", api_key="key-blocked", status="blocked"),
            User(
                email="paused@example.gov", api_key="key-paused", status="suspended"
            ),
        ]
    )


class TestExtractApiKey:
    """Where API keys are read from."""

    def test_bearer_token_wins(self) -> None:
        event = {"headers": {"Authorization": "Bearer abc", "x-api-key": "xyz"}}

        assert extract_api_key(event) == "abc"

    def test_x_api_key_any_case(self) -> None:
        assert extract_api_key({"headers": {"X-API-Key": "xyz"}}) == "xyz"

    def test_non_bearer_authorization_falls_back(self) -> None:
        event = {"headers": {"authorization": "Basic abc", "x-api-key": "xyz"}}

        assert extract_api_key(event) == "xyz"

    @pytest.mark.parametrize(
        "event",
        [
            {},
            {"headers": None},
            {"headers": {}},
            {"headers": {"x-api-key": ""}},
            {"headers": {"authorization": "Bearer "}},
        ],
    )
    def test_missing(self, event: dict) -> None:
        assert extract_api_key(event) is None

    def test_get_header_ignores_case(self) -> None:
        assert get_header({"Content-Type": "a"}, "content-type") == "a"
        assert get_header({"Content-Type": "a"}, "accept") is None

    def test_redact_key(self) -> None:
        assert redact_key("abcdefghijklmnop") == "abcdefghijkl..."


class TestAuthenticate:
    """Outcomes of authenticate()."""

    @pytest.mark.anyio()
    async def test_success(self, store: InMemoryUserStore) -> None:
        result = await authenticate({"headers": {"x-api-key": "key-ok"}}, store)

        assert result.authenticated
        assert result.user is not None
        assert result.user.email == "ok@example.gov"
        assert result.api_key == "key-ok"
        assert result.error is None

    @pytest.mark.anyio()
    @pytest.mark.parametrize(
        ("headers", "message"),
        [
            ({}, NO_KEY_MESSAGE),
            ({"x-api-key": "key-unknown"}, INVALID_KEY_MESSAGE),
            ({"x-api-key": "key-blocked"}, BLOCKED_MESSAGE),
            ({"authorization": "Bearer key-paused"}, SUSPENDED_MESSAGE),
        ],
    )
    async def test_rejections(
        self, store: InMemoryUserStore, headers: dict, message: str
    ) -> None:
        result = await authenticate({"headers": headers}, store)

        assert not result.authenticated
        assert result.user is None
        assert result.error == message

    @pytest.mark.anyio()
    async def test_store_failure_is_reported(self) -> None:
        result = await authenticate({"headers": {"x-api-key": "k"}}, _BrokenStore())

        assert not result.authenticated
        assert result.error == UNAVAILABLE_MESSAGE

    @pytest.mark.anyio()
    async def test_static_key_store(self) -> None:
        store = StaticKeyUserStore("secret-key")

        accepted = await authenticate({"headers": {"x-api-key": "secret-key"}}, store)
        rejected = await authenticate({"headers": {"x-api-key": "secret-kez"}}, store)

        assert accepted.authenticated
        assert accepted.user is not None
        assert accepted.user.tier == "pro"
        assert rejected.error == INVALID_KEY_MESSAGE

    @pytest.mark.anyio()
    async def test_store_add(self) -> None:
        store = InMemoryUserStore()
        store.add(User(email="new@example.gov", api_key="fresh"))

        assert (await store.get_user_by_api_key("fresh")) is not None


class TestOrigin:
    """Origin header validation."""

    def test_no_origin_is_allowed(self) -> None:
        assert validate_origin({"x-api-key": "k"}).valid
        assert validate_origin(None).valid

    @pytest.mark.parametrize(
        "origin",
        [
            "https://uswdsmcp.com",
            "http://localhost:5173",
            "https://dev-api.uswdsmcp.com",
        ],
    )
    def test_allowed(self, origin: str) -> None:
        assert validate_origin({"Origin": origin}).valid

    def test_rejected(self) -> None:
        check = validate_origin({"origin": "https://evil.example"})

        assert not check.valid
        assert check.error == (
            "Origin 'https://evil.example' is not allowed. This server only "
            "accepts requests from authorized domains."
        )

    def test_development_allows_anything(self) -> None:
        assert validate_origin({"origin": "https://evil.example"}, True).valid

    @pytest.mark.parametrize(
        ("origin", "expected"),
        [
            ("https://staging-api.uswdsmcp.com", True),
            ("https://api.uswdsmcp.com.evil.example", False),
            ("https://evil-api.uswdsmcp.com.example", False),
            ("not a url", False),
        ],
    )
    def test_stage_origin(self, origin: str, expected: bool) -> None:
        assert is_stage_origin(origin) is expected
