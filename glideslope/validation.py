"""Validation rules — compute non-blocking advisory warnings for an approach.

Implements:
  - A01 non-standard glide slope angle
  - A02 TCH outside the 20-100 ft band
  - A03 aim point outside the 500-1500 ft band
  - A04 touchdown beyond the modelled runway

Range violations of the *independent* inputs are rejected by the pydantic
models; these checks cover the derived side of the equation and advisory
limits. All warnings are level="warn" and never block a result.
"""

from __future__ import annotations

from glideslope.models import (
    AIM_POINT_MAX_FT,
    AIM_POINT_MIN_FT,
    TCH_MAX_FT,
    TCH_MIN_FT,
    ApproachConfiguration,
    ApproachWarning,
    RunwayGeometry,
)

STANDARD_GLIDE_SLOPE_DEG = 3.0
GLIDE_SLOPE_TOLERANCE_DEG = 0.5


def _check_a01(config: ApproachConfiguration, out: list[ApproachWarning]) -> None:
    """A01: angle more than 0.5° away from the standard 3° glide slope."""
    deviation = config.glide_slope_angle_deg - STANDARD_GLIDE_SLOPE_DEG
    if abs(deviation) > GLIDE_SLOPE_TOLERANCE_DEG:
        kind = "Steep" if deviation > 0 else "Shallow"
        out.append(
            ApproachWarning(
                id="A01",
                message=(
                    f"{kind} approach — {config.glide_slope_angle_deg:.1f}° differs from "
                    f"the standard {STANDARD_GLIDE_SLOPE_DEG:.0f}° glide slope"
                ),
                fields=["glide_slope_angle_deg"],
            )
        )


def _check_a02(config: ApproachConfiguration, out: list[ApproachWarning]) -> None:
    """A02: TCH outside the usual band (derived, or carried over by a toggle)."""
    if not TCH_MIN_FT <= config.tch_feet <= TCH_MAX_FT:
        out.append(
            ApproachWarning(
                id="A02",
                message=(
                    f"Threshold crossing height {config.tch_feet:.0f} ft is outside "
                    f"{TCH_MIN_FT:.0f}-{TCH_MAX_FT:.0f} ft"
                ),
                fields=["tch_feet", "aim_point_feet", "glide_slope_angle_deg"],
            )
        )


def _check_a03(config: ApproachConfiguration, out: list[ApproachWarning]) -> None:
    """A03: aim point outside the usual band (derived, or carried over by a toggle)."""
    if not AIM_POINT_MIN_FT <= config.aim_point_feet <= AIM_POINT_MAX_FT:
        out.append(
            ApproachWarning(
                id="A03",
                message=(
                    f"Aim point {config.aim_point_feet:.0f} ft is outside "
                    f"{AIM_POINT_MIN_FT:.0f}-{AIM_POINT_MAX_FT:.0f} ft from the threshold"
                ),
                fields=["aim_point_feet", "tch_feet", "glide_slope_angle_deg"],
            )
        )


def _check_a04(
    config: ApproachConfiguration, runway: RunwayGeometry, out: list[ApproachWarning]
) -> None:
    """A04: touchdown point past the end of the modelled runway."""
    if config.aim_point_feet > runway.length_ft:
        out.append(
            ApproachWarning(
                id="A04",
                message=(
                    f"Aim point {config.aim_point_feet:.0f} ft is beyond the "
                    f"{runway.length_ft:.0f} ft runway"
                ),
                fields=["aim_point_feet"],
            )
        )


def compute_warnings(
    config: ApproachConfiguration,
    runway: RunwayGeometry | None = None,
) -> list[ApproachWarning]:
    """Compute all advisory warnings for a reconciled configuration."""
    if runway is None:
        runway = RunwayGeometry()

    warnings: list[ApproachWarning] = []
    _check_a01(config, warnings)
    _check_a02(config, warnings)
    _check_a03(config, warnings)
    _check_a04(config, runway, warnings)
    return warnings
