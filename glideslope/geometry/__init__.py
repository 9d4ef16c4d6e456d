"""Geometry engine and view projector -- public API re-exports.

Usage::

    from glideslope.geometry import reconcile, project, build_approach_result
"""

from __future__ import annotations

from glideslope.geometry.engine import (
    build_approach_result,
    compute_derived_values,
    compute_vertical_speed,
    derive_aim_point_from_tch,
    derive_tch_from_aim_point,
    reconcile,
    toggle_mode,
)
from glideslope.geometry.projection import project, view_box

__all__ = [
    "build_approach_result",
    "compute_derived_values",
    "compute_vertical_speed",
    "derive_aim_point_from_tch",
    "derive_tch_from_aim_point",
    "project",
    "reconcile",
    "toggle_mode",
    "view_box",
]
