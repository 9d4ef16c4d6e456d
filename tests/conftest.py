"""Shared fixtures for glideslope tests."""

from __future__ import annotations

import pytest

from glideslope.models import ApproachConfiguration, ApproachMode, RunwayGeometry, ViewSpace


# ---------------------------------------------------------------------------
# Configuration fixtures (used by engine, projection & validation tests)
# ---------------------------------------------------------------------------


@pytest.fixture
def default_config() -> ApproachConfiguration:
    """Defaults of the calculator: fixed TCH 50 ft, 3°, 55 kt."""
    return ApproachConfiguration()


@pytest.fixture
def aim_point_config() -> ApproachConfiguration:
    """Fixed aim point at the standard 1000 ft touchdown zone, 3°."""
    return ApproachConfiguration(
        mode=ApproachMode.AIM_POINT_FIXED,
        glide_slope_angle_deg=3.0,
        ground_speed_knots=55,
        aim_point_feet=1000,
    )


@pytest.fixture
def steep_config() -> ApproachConfiguration:
    """Steepest, fastest approach the input contract allows."""
    return ApproachConfiguration(
        mode=ApproachMode.AIM_POINT_FIXED,
        glide_slope_angle_deg=7.0,
        ground_speed_knots=70,
        aim_point_feet=1500,
    )


@pytest.fixture
def shallow_config() -> ApproachConfiguration:
    """Shallowest angle with the highest TCH — aim point lands past the runway."""
    return ApproachConfiguration(
        mode=ApproachMode.TCH_FIXED,
        glide_slope_angle_deg=2.0,
        ground_speed_knots=40,
        tch_feet=100,
    )


@pytest.fixture
def runway() -> RunwayGeometry:
    return RunwayGeometry()


@pytest.fixture
def view() -> ViewSpace:
    return ViewSpace()
