"""Tests for GET /api/info -- deployment and input contract endpoint."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from glideslope.main import app


@pytest.fixture
def client() -> TestClient:
    """Return a TestClient for the FastAPI app."""
    return TestClient(app)


class TestInfoEndpoint:
    """Tests for /api/info endpoint."""

    def test_returns_local_by_default(self, client: TestClient, monkeypatch) -> None:
        """Deployment is local when GLIDESLOPE_DEPLOYMENT is not set."""
        monkeypatch.delenv("GLIDESLOPE_DEPLOYMENT", raising=False)
        resp = client.get("/api/info")
        assert resp.status_code == 200
        assert resp.json()["deployment"] == "local"

    def test_returns_cloud_when_env_is_cloud(self, client: TestClient, monkeypatch) -> None:
        """Deployment is cloud when GLIDESLOPE_DEPLOYMENT=cloud."""
        monkeypatch.setenv("GLIDESLOPE_DEPLOYMENT", "cloud")
        assert client.get("/api/info").json()["deployment"] == "cloud"

    def test_version_field_matches_app_version(self, client: TestClient) -> None:
        """Version matches the FastAPI app version."""
        assert client.get("/api/info").json()["version"] == app.version

    def test_modes(self, client: TestClient) -> None:
        """Both modes are published in wire form."""
        assert client.get("/api/info").json()["modes"] == ["tch", "aimpoint"]

    def test_parameter_ranges(self, client: TestClient) -> None:
        """Slider ranges are published with step and unit."""
        ranges = {r["name"]: r for r in client.get("/api/info").json()["parameterRanges"]}
        assert set(ranges) == {
            "glide_slope_angle_deg",
            "ground_speed_knots",
            "tch_feet",
            "aim_point_feet",
        }
        assert ranges["aim_point_feet"]["step"] == 100
        assert ranges["glide_slope_angle_deg"]["unit"] == "deg"

    def test_runway_and_view(self, client: TestClient) -> None:
        """Runway and view geometry are published in camelCase."""
        data = client.get("/api/info").json()
        assert data["runway"]["lengthFt"] == 2000
        assert data["runway"]["stripeCount"] == 4
        assert data["view"]["horizontalScale"] == 0.3
        assert data["view"]["verticalScale"] == 1.5
