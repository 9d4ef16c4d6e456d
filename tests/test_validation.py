"""Tests for advisory approach warnings (A01-A04)."""

from __future__ import annotations

from glideslope.geometry.engine import reconcile, toggle_mode
from glideslope.models import ApproachConfiguration, RunwayGeometry
from glideslope.validation import compute_warnings


def _ids(warnings):
    return [w.id for w in warnings]


class TestNoWarnings:
    """Standard approaches raise nothing."""

    def test_default_approach_is_clean(self, default_config) -> None:
        """Default approach has no warnings."""
        assert compute_warnings(reconcile(default_config)) == []

    def test_standard_touchdown_zone_is_clean(self, aim_point_config) -> None:
        """Aim point at 1000 ft on 3° has no warnings."""
        assert compute_warnings(reconcile(aim_point_config)) == []


class TestA01GlideSlope:
    """A01: non-standard glide slope."""

    def test_steep(self) -> None:
        """4° is flagged as steep."""
        cfg = reconcile(ApproachConfiguration(glide_slope_angle_deg=4.0))
        (warning,) = [w for w in compute_warnings(cfg) if w.id == "A01"]
        assert warning.message.startswith("Steep")
        assert warning.fields == ["glide_slope_angle_deg"]

    def test_shallow(self) -> None:
        """2.4° is flagged as shallow."""
        cfg = reconcile(ApproachConfiguration(glide_slope_angle_deg=2.4, tch_feet=40))
        (warning,) = [w for w in compute_warnings(cfg) if w.id == "A01"]
        assert warning.message.startswith("Shallow")

    def test_within_tolerance(self) -> None:
        """3.5° is within the 0.5° tolerance."""
        cfg = reconcile(ApproachConfiguration(glide_slope_angle_deg=3.5))
        assert "A01" not in _ids(compute_warnings(cfg))


class TestA02DerivedTch:
    """A02: TCH outside 20-100 ft."""

    def test_high_tch_from_far_aim_point(self, steep_config) -> None:
        """7° with a 1500 ft aim point derives 184 ft."""
        cfg = reconcile(steep_config)
        assert cfg.tch_feet == 184
        assert "A02" in _ids(compute_warnings(cfg))

    def test_low_tch_from_near_aim_point(self) -> None:
        # 500 * tan(2°) = 17.5 -> 17 ft
        cfg = reconcile(
            ApproachConfiguration(mode="aimpoint", glide_slope_angle_deg=2.0, aim_point_feet=500)
        )
        assert cfg.tch_feet == 17
        assert "A02" in _ids(compute_warnings(cfg))

    def test_toggled_in_tch_flagged(self, steep_config) -> None:
        """A 184 ft TCH carried over as the fixed value is still flagged."""
        cfg = toggle_mode(reconcile(steep_config))
        assert cfg.mode == "tch"
        assert cfg.tch_feet == 184
        assert "A02" in _ids(compute_warnings(cfg))


class TestA03DerivedAimPoint:
    """A03: aim point outside 500-1500 ft."""

    def test_far_aim_point(self, shallow_config) -> None:
        """2° with TCH 100 ft lands far down the runway."""
        assert "A03" in _ids(compute_warnings(reconcile(shallow_config)))

    def test_near_aim_point(self) -> None:
        # 20 / tan(7°) = 162.9 -> 163 ft
        cfg = reconcile(ApproachConfiguration(glide_slope_angle_deg=7.0, tch_feet=20))
        assert cfg.aim_point_feet == 163
        assert "A03" in _ids(compute_warnings(cfg))


class TestA04BeyondRunway:
    """A04: touchdown past the runway end."""

    def test_touchdown_past_runway_end(self, shallow_config) -> None:
        """A 2864 ft aim point is beyond the 2000 ft runway."""
        cfg = reconcile(shallow_config)
        assert cfg.aim_point_feet == 2864
        assert _ids(compute_warnings(cfg)) == ["A01", "A03", "A04"]

    def test_longer_runway_clears_warning(self, shallow_config) -> None:
        """Runway length comes from RunwayGeometry."""
        runway = RunwayGeometry(length_ft=3000)
        assert "A04" not in _ids(compute_warnings(reconcile(shallow_config), runway))


class TestWarningShape:
    """Warning payload shape."""

    def test_all_level_warn(self, shallow_config) -> None:
        """Every warning is level 'warn'."""
        warnings = compute_warnings(reconcile(shallow_config))
        assert warnings
        assert all(w.level == "warn" for w in warnings)

    def test_camel_case_dump(self, steep_config) -> None:
        """Dumped keys are id, level, message, fields."""
        (first, *_) = compute_warnings(reconcile(steep_config))
        assert set(first.model_dump(by_alias=True)) == {"id", "level", "message", "fields"}
