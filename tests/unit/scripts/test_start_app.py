"""Unit tests for the startup script."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from guestbook.config import Settings
from scripts import start_app


@pytest.fixture
def uvicorn_run(monkeypatch):
    """Patch logging and the server so main() can run in-process."""
    for name in ["PORT", "HOST", "DATABASE__URL"]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(start_app, "Settings", lambda: Settings(_env_file=None))
    monkeypatch.setattr(start_app, "setup_logging", MagicMock())
    monkeypatch.setattr(start_app, "configure_logfire", MagicMock())
    run = MagicMock()
    monkeypatch.setattr(start_app.uvicorn, "run", run)
    return run


class TestMain:
    """Tests for start_app.main."""

    def test_missing_database_url_exits_with_error(self, uvicorn_run):
        """Without a connection string the server must not start."""
        assert start_app.main() == 1
        uvicorn_run.assert_not_called()

    def test_unreachable_database_exits_with_error(self, uvicorn_run, monkeypatch):
        monkeypatch.setenv("DATABASE__URL", "postgresql+asyncpg://u:p@nowhere/db")
        monkeypatch.setattr(
            start_app,
            "prepare_database",
            AsyncMock(side_effect=OSError("Connection refused")),
        )

        assert start_app.main() == 1
        uvicorn_run.assert_not_called()

    def test_starts_server_on_configured_port(self, uvicorn_run, monkeypatch):
        monkeypatch.setenv("DATABASE__URL", "postgresql+asyncpg://u:p@db/guestbook")
        monkeypatch.setenv("PORT", "8080")
        prepare = AsyncMock()
        monkeypatch.setattr(start_app, "prepare_database", prepare)

        assert start_app.main() == 0

        prepare.assert_awaited_once()
        uvicorn_run.assert_called_once()
        _, kwargs = uvicorn_run.call_args
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 8080
