"""CLI-level coverage for the FastMCP server entry point."""

from __future__ import annotations

import pytest

from uswds_mcp_server import main as server_main


class _DummyApp:
    """Shim FastMCP app to capture run invocations without network I/O."""

    def __init__(self) -> None:
        self.run_calls: list[dict[str, object]] = []

    def run(self, *, transport: str, **kwargs: object) -> None:
        self.run_calls.append({"transport": transport, **kwargs})


@pytest.fixture()
def dummy_app(monkeypatch: pytest.MonkeyPatch) -> _DummyApp:
    app = _DummyApp()
    monkeypatch.setattr(server_main, "build_fastmcp_app", lambda _services: (app, []))
    monkeypatch.setattr(server_main, "configure_logging", lambda _level: None)
    return app


def test_main_runs_fastmcp_with_transport(dummy_app: _DummyApp) -> None:
    """main() delegates to FastMCP.run with the provided transport settings."""
    exit_code = server_main.main(
        [
            "--transport",
            "http",
            "--host",
            "127.0.0.1",
            "--port",
            "8080",
            "--path",
            "/mcp",
        ]
    )

    assert exit_code == 0
    assert dummy_app.run_calls == [
        {"transport": "http", "host": "127.0.0.1", "port": 8080, "path": "/mcp"}
    ]


def test_main_defaults_to_stdio(dummy_app: _DummyApp) -> None:
    """Without arguments the server speaks MCP over stdio."""
    assert server_main.main([]) == 0
    assert dummy_app.run_calls == [{"transport": "stdio"}]


def test_unknown_transport_is_rejected(dummy_app: _DummyApp) -> None:
    with pytest.raises(SystemExit):
        server_main.main(["--transport", "sse"])

    assert dummy_app.run_calls == []
