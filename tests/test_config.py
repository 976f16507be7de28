"""Tests for environment settings and logging setup."""

from __future__ import annotations

import io
import logging
from collections.abc import Iterator

import pytest
from pydantic import ValidationError

from uswds_mcp_server.config import Settings, get_settings
from uswds_mcp_server.logging_setup import configure_logging


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    for name in (
        "USE_REACT_COMPONENTS",
        "LOG_LEVEL",
        "API_KEY",
        "ENVIRONMENT",
        "RATE_LIMIT_PER_MINUTE",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        settings = Settings()

        assert settings.use_react_components is False
        assert settings.log_level == "info"
        assert settings.api_key is None
        assert settings.rate_limit_per_minute == 100
        assert settings.rate_limit_per_day == 10_000
        assert settings.cache_dir == "/tmp/mcp-cache"
        assert not settings.is_development

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("true", True), ("TRUE", True), ("1", True), ("false", False), ("", False)],
    )
    def test_react_flag(
        self, clean_env: pytest.MonkeyPatch, raw: str, expected: bool
    ) -> None:
        clean_env.setenv("USE_REACT_COMPONENTS", raw)

        assert Settings().use_react_components is expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("DEBUG", "debug"), (" warning ", "warning"), ("verbose", "info")],
    )
    def test_log_level(
        self, clean_env: pytest.MonkeyPatch, raw: str, expected: str
    ) -> None:
        clean_env.setenv("LOG_LEVEL", raw)

        assert Settings().log_level == expected

    @pytest.mark.parametrize("raw", ["dev", "Development"])
    def test_development(self, clean_env: pytest.MonkeyPatch, raw: str) -> None:
        clean_env.setenv("ENVIRONMENT", raw)

        assert Settings().is_development

    def test_rate_limit_must_be_positive(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("RATE_LIMIT_PER_MINUTE", "0")

        with pytest.raises(ValidationError):
            Settings()

    def test_get_settings_is_cached(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("API_KEY", "k")

        assert get_settings() is get_settings()
        assert get_settings().api_key == "k"


class TestLogging:
    @pytest.fixture(autouse=True)
    def _restore_root(self) -> Iterator[None]:
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_format_and_level(self) -> None:
        stream = io.StringIO()

        configure_logging("WARNING", stream)
        logging.getLogger("uswds.test").info("hidden")
        logging.getLogger("uswds.test").warning("shown")

        assert stream.getvalue() == "[WARNING] uswds.test: shown\n"

    def test_unknown_level_means_info(self) -> None:
        configure_logging("chatty", io.StringIO())

        assert logging.getLogger().level == logging.INFO
