"""Tests for environment-driven configuration.

Verifies:
- GLIDESLOPE_DEPLOYMENT parsing and fallback
- CORS defaults per deployment and GLIDESLOPE_CORS_ORIGINS override
- GLIDESLOPE_LOG_LEVEL parsing
"""

from __future__ import annotations

import importlib
import logging

import pytest
from httpx import ASGITransport, AsyncClient

from glideslope.settings import get_cors_origins, get_deployment, get_log_level


@pytest.fixture(autouse=True)
def reset_module():
    """Reload main after each test so env changes do not leak."""
    yield
    import glideslope.main as main_mod

    importlib.reload(main_mod)


class TestDeployment:
    """GLIDESLOPE_DEPLOYMENT parsing."""

    def test_default_local(self, monkeypatch) -> None:
        """Unset means local."""
        monkeypatch.delenv("GLIDESLOPE_DEPLOYMENT", raising=False)
        assert get_deployment() == "local"

    def test_case_and_whitespace_insensitive(self, monkeypatch) -> None:
        """Value is stripped and lowercased."""
        monkeypatch.setenv("GLIDESLOPE_DEPLOYMENT", "  CLOUD ")
        assert get_deployment() == "cloud"

    def test_unknown_falls_back_to_local(self, monkeypatch, caplog) -> None:
        """Unknown values fall back to local with a warning."""
        monkeypatch.setenv("GLIDESLOPE_DEPLOYMENT", "staging")
        with caplog.at_level(logging.WARNING, logger="glideslope.settings"):
            assert get_deployment() == "local"
        assert "staging" in caplog.text


class TestCorsOrigins:
    """CORS origins per deployment."""

    def test_local_defaults(self, monkeypatch) -> None:
        """Local allows the dev server origins only."""
        monkeypatch.setenv("GLIDESLOPE_DEPLOYMENT", "local")
        monkeypatch.delenv("GLIDESLOPE_CORS_ORIGINS", raising=False)
        origins = get_cors_origins()
        assert "*" not in origins
        assert any("5173" in o for o in origins)

    def test_cloud_allows_all(self, monkeypatch) -> None:
        """Cloud allows any origin."""
        monkeypatch.setenv("GLIDESLOPE_DEPLOYMENT", "cloud")
        monkeypatch.delenv("GLIDESLOPE_CORS_ORIGINS", raising=False)
        assert get_cors_origins() == ["*"]

    def test_override(self, monkeypatch) -> None:
        """GLIDESLOPE_CORS_ORIGINS overrides the default list."""
        monkeypatch.setenv("GLIDESLOPE_DEPLOYMENT", "cloud")
        monkeypatch.setenv(
            "GLIDESLOPE_CORS_ORIGINS", "https://app.example.com, https://dev.example.com,"
        )
        assert get_cors_origins() == ["https://app.example.com", "https://dev.example.com"]

    def test_main_credentials_follow_origins(self, monkeypatch) -> None:
        """main.py enables wildcard CORS in cloud."""
        monkeypatch.setenv("GLIDESLOPE_DEPLOYMENT", "cloud")
        monkeypatch.delenv("GLIDESLOPE_CORS_ORIGINS", raising=False)
        import glideslope.main as main_mod

        importlib.reload(main_mod)
        assert main_mod._allow_origins == ["*"]
        assert main_mod._allow_all is True

    def test_main_local_not_wildcard(self, monkeypatch) -> None:
        """main.py never uses a wildcard locally."""
        monkeypatch.setenv("GLIDESLOPE_DEPLOYMENT", "local")
        monkeypatch.delenv("GLIDESLOPE_CORS_ORIGINS", raising=False)
        import glideslope.main as main_mod

        importlib.reload(main_mod)
        assert main_mod._allow_all is False


class TestLogLevel:
    """GLIDESLOPE_LOG_LEVEL parsing."""

    def test_default_info(self, monkeypatch) -> None:
        """Unset means INFO."""
        monkeypatch.delenv("GLIDESLOPE_LOG_LEVEL", raising=False)
        assert get_log_level() == logging.INFO

    def test_named_level(self, monkeypatch) -> None:
        """Level names are case-insensitive."""
        monkeypatch.setenv("GLIDESLOPE_LOG_LEVEL", "debug")
        assert get_log_level() == logging.DEBUG

    def test_unknown_level(self, monkeypatch) -> None:
        """Unknown names fall back to INFO."""
        monkeypatch.setenv("GLIDESLOPE_LOG_LEVEL", "chatty")
        assert get_log_level() == logging.INFO


class TestHealthDeployment:
    """/health reflects the deployment."""

    @pytest.mark.asyncio
    async def test_cloud_health_reports_cloud(self, monkeypatch) -> None:
        """Cloud deployment is reported by /health."""
        monkeypatch.setenv("GLIDESLOPE_DEPLOYMENT", "cloud")
        import glideslope.main as main_mod

        importlib.reload(main_mod)
        async with AsyncClient(
            transport=ASGITransport(app=main_mod.app), base_url="http://test"
        ) as client:
            r = await client.get("/health")
        assert r.status_code == 200
        assert r.json()["deployment"] == "cloud"
