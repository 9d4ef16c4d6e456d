"""Geometry engine -- glide-path derivations and the approach entry point.

Keeps glide-slope angle, threshold crossing height (TCH), aim-point distance
and vertical speed mutually consistent:

    tan(angle) = tch_feet / aim_point_feet

- ``compute_vertical_speed()`` -- knots + angle -> feet per minute
- ``derive_aim_point_from_tch()`` / ``derive_tch_from_aim_point()``
- ``reconcile()`` -- mode dispatch, returns a new configuration
- ``toggle_mode()`` -- the only mode transition
- ``build_approach_result()`` -- reconcile + project + warnings

Everything here is pure math on immutable models. Range enforcement happens
in the pydantic models before a configuration reaches this module.
"""

from __future__ import annotations

import math
from typing import Any

from glideslope.models import (
    GLIDE_SLOPE_MAX_DEG,
    GLIDE_SLOPE_MIN_DEG,
    ApproachConfiguration,
    ApproachMode,
    ApproachResult,
    DerivedValues,
    RunwayGeometry,
    ViewBox,
    ViewSpace,
)
from glideslope.validation import compute_warnings

# Knots to feet per minute: 6076.12 ft/nm / 60 min.
KNOTS_TO_FPM: float = 101.269


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _round(value: float) -> int:
    """Round half up, matching the browser UI (``Math.round``).

    Python's ``round()`` rounds half to even, which would make 52.5 ft
    display as 52 here and 53 in the client.
    """
    return math.floor(value + 0.5)


def tan_deg(angle_deg: float) -> float:
    """Tangent of a glide-slope angle in degrees.

    Raises:
        ValueError: If the angle is non-finite or outside the accepted
            glide-slope band. A shallow angle would make the aim point
            blow up towards infinity and reach the renderer as NaN/inf.
    """
    if not math.isfinite(angle_deg) or not (
        GLIDE_SLOPE_MIN_DEG <= angle_deg <= GLIDE_SLOPE_MAX_DEG
    ):
        raise ValueError(
            f"glide slope angle must be between {GLIDE_SLOPE_MIN_DEG:g} and "
            f"{GLIDE_SLOPE_MAX_DEG:g} degrees (got {angle_deg!r})"
        )
    return math.tan(math.radians(angle_deg))


# ---------------------------------------------------------------------------
# Public API: derivations
# ---------------------------------------------------------------------------


def compute_vertical_speed(ground_speed_knots: float, glide_slope_angle_deg: float) -> int:
    """Descent rate (ft/min) implied by ground speed along the glide slope.

    Example: 55 kt on a 3° slope -> 5569.8 ft/min * tan(3°) -> 292 fpm.
    """
    ground_speed_fpm = ground_speed_knots * KNOTS_TO_FPM
    return _round(ground_speed_fpm * tan_deg(glide_slope_angle_deg))


def derive_aim_point_from_tch(tch_feet: float, glide_slope_angle_deg: float) -> int:
    """Distance past the threshold where the path meets the runway (ft)."""
    return _round(tch_feet / tan_deg(glide_slope_angle_deg))


def derive_tch_from_aim_point(aim_point_feet: float, glide_slope_angle_deg: float) -> int:
    """Height of the path over the threshold for a given aim point (ft)."""
    return _round(aim_point_feet * tan_deg(glide_slope_angle_deg))


# ---------------------------------------------------------------------------
# Public API: state transitions
# ---------------------------------------------------------------------------


def reconcile(config: ApproachConfiguration) -> ApproachConfiguration:
    """Re-derive the dependent field and vertical speed.

    TCH fixed      -> aim point recomputed from TCH and angle.
    Aim point fixed -> TCH recomputed from aim point and angle.
    Vertical speed is recomputed in both modes.

    Returns a new configuration; ``config`` is left untouched.
    """
    angle = config.glide_slope_angle_deg
    update: dict[str, Any] = {
        "vertical_speed_fpm": compute_vertical_speed(config.ground_speed_knots, angle),
    }
    if config.mode is ApproachMode.TCH_FIXED:
        update["aim_point_feet"] = float(derive_aim_point_from_tch(config.tch_feet, angle))
    else:
        update["tch_feet"] = float(derive_tch_from_aim_point(config.aim_point_feet, angle))
    return config.model_copy(update=update)


def toggle_mode(config: ApproachConfiguration) -> ApproachConfiguration:
    """Switch which field drives the approach.

    The value last held by the previously dependent field becomes the new
    independent value; nothing is reset. Repeated toggling can drift by at
    most one foot per toggle because derived values are whole feet.
    """
    flipped = config.model_copy(update={"mode": config.mode.other})
    return reconcile(flipped)


def compute_derived_values(config: ApproachConfiguration) -> dict[str, Any]:
    """Display values for a reconciled configuration.

    Returns:
        Dict matching the fields of ``DerivedValues``.
    """
    if config.mode is ApproachMode.TCH_FIXED:
        field, value = "aim_point_feet", config.aim_point_feet
    else:
        field, value = "tch_feet", config.tch_feet
    return {
        "dependent_field": field,
        "dependent_value_feet": value,
        "vertical_speed_fpm": config.vertical_speed_fpm,
    }


# ---------------------------------------------------------------------------
# Public API: full computation
# ---------------------------------------------------------------------------


def build_approach_result(
    config: ApproachConfiguration,
    runway: RunwayGeometry | None = None,
    view: ViewSpace | None = None,
) -> ApproachResult:
    """Reconcile ``config`` then project it into drawing primitives.

    Reconciliation always completes before projection, since the approach
    path depends on the derived aim point / TCH.
    """
    # projection imports tan_deg from this module.
    from glideslope.geometry.projection import DEFAULT_RUNWAY, DEFAULT_VIEW, project, view_box

    runway = runway or DEFAULT_RUNWAY
    view = view or DEFAULT_VIEW

    reconciled = reconcile(config)
    min_x, min_y, width, height = view_box(view)
    return ApproachResult(
        configuration=reconciled,
        derived=DerivedValues(**compute_derived_values(reconciled)),
        warnings=compute_warnings(reconciled, runway),
        view_box=ViewBox(min_x=min_x, min_y=min_y, width=width, height=height),
        primitives=project(reconciled, runway, view),
    )
