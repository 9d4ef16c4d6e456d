"""View projector -- runway-relative world coordinates to drawing primitives.

World frame (feet):
  X = distance from the runway threshold, positive down the runway,
      negative on the approach side.
  Y = height above the runway surface.

Pixel frame:
  pixel_x = world_x * horizontal_scale
  pixel_y = height_px - baseline_offset_px - world_y * vertical_scale

i.e. the vertical axis is flipped so world "up" is screen "up", and the
runway surface sits ``baseline_offset_px`` above the bottom of the view.

The runway furniture (surface, stripes, centerline, touchdown-zone bars,
labels, grid) is drawn in fixed pixel sizes beneath the baseline; only the
approach path and the two ticks carry the live approach state.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from glideslope.geometry.engine import tan_deg
from glideslope.models import (
    ApproachConfiguration,
    GeometricPrimitive,
    LinePrimitive,
    PathPrimitive,
    RectanglePrimitive,
    RunwayGeometry,
    Style,
    TextPrimitive,
    ViewSpace,
)

DEFAULT_RUNWAY = RunwayGeometry()
DEFAULT_VIEW = ViewSpace()

# Runway diagram stations (world feet).
DISTANCE_STATIONS_FT: tuple[int, ...] = (0, 250, 500, 750, 1000, 1250, 1500)
HEIGHT_STATIONS_FT: tuple[int, ...] = (0, 50, 100, 150, 200, 250, 300)
APPROACH_START_FT: float = -500.0
CENTERLINE_START_FT: float = 300.0

# Standard touchdown-zone marking, not the computed aim point.
TOUCHDOWN_MARKER_X_FT: float = 1000.0
TOUCHDOWN_MARKER_LENGTH_FT: float = 150.0
TOUCHDOWN_MARKER_HEIGHT_PX: float = 15.0
TOUCHDOWN_MARKER_GAP_PX: float = 25.0

# Fixed pixel offsets below the baseline.
DISTANCE_LABEL_OFFSET_PX: float = 60.0
HEIGHT_LABEL_X_PX: float = -40.0
TCH_TICK_LENGTH_PX: float = 20.0
AIM_TICK_LENGTH_PX: float = 40.0

_RUNWAY_STYLE = Style(fill="#333333")
_MARKING_STYLE = Style(fill="white")
_CENTERLINE_STYLE = Style(stroke="white", stroke_width=2, dash=(36, 24))
_GRID_STYLE = Style(stroke="#eee", stroke_width=1, dash=(5, 5))
_DISTANCE_LABEL_STYLE = Style(fill="black", font_size=12, text_anchor="middle")
_HEIGHT_LABEL_STYLE = Style(fill="black", font_size=12, dominant_baseline="middle")
_PATH_STYLE = Style(stroke="red", stroke_width=2, fill="none")
_TICK_STYLE = Style(stroke="blue", stroke_width=2)


# ---------------------------------------------------------------------------
# Coordinate transform
# ---------------------------------------------------------------------------


def to_pixels(points: NDArray[np.float64] | list[tuple[float, float]], view: ViewSpace) -> NDArray[np.float64]:
    """Map an (N, 2) array of world (x, y) feet to pixel (x, y)."""
    world = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    scale = np.array([view.horizontal_scale, -view.vertical_scale])
    offset = np.array([0.0, view.baseline_y])
    return world * scale + offset


def pixel_x(world_x: float, view: ViewSpace) -> float:
    return float(world_x * view.horizontal_scale)


def pixel_y(world_y: float, view: ViewSpace) -> float:
    return float(view.baseline_y - world_y * view.vertical_scale)


def view_box(view: ViewSpace) -> tuple[float, float, float, float]:
    """``(min_x, min_y, width, height)`` of the visible pixel area."""
    return (view.origin_x_px, 0.0, view.width_px, view.height_px)


# ---------------------------------------------------------------------------
# Primitive builders
# ---------------------------------------------------------------------------


def _runway_markings(runway: RunwayGeometry, view: ViewSpace) -> list[GeometricPrimitive]:
    """Surface, threshold stripes, centerline and touchdown-zone bars."""
    base = view.baseline_y
    runway_end_px = pixel_x(runway.length_ft, view)
    stripe = runway.stripe_width_ft

    out: list[GeometricPrimitive] = [
        RectanglePrimitive(
            role="runway_surface",
            x=0.0,
            y=base,
            width=runway_end_px,
            height=runway.width_ft,
            style=_RUNWAY_STYLE,
        )
    ]

    # Stripes tile across the runway width with a stripe-sized gap between.
    for i in range(runway.stripe_count):
        out.append(
            RectanglePrimitive(
                role="threshold_stripe",
                x=0.0,
                y=base + 2 * stripe * i,
                width=runway.width_ft,
                height=stripe,
                style=_MARKING_STYLE,
            )
        )

    centerline_y = base + runway.width_ft / 2
    out.append(
        LinePrimitive(
            role="centerline",
            x1=pixel_x(CENTERLINE_START_FT, view),
            y1=centerline_y,
            x2=runway_end_px,
            y2=centerline_y,
            style=_CENTERLINE_STYLE,
        )
    )

    marker_x = pixel_x(TOUCHDOWN_MARKER_X_FT, view)
    marker_w = pixel_x(TOUCHDOWN_MARKER_LENGTH_FT, view)
    for y in (base, base + TOUCHDOWN_MARKER_GAP_PX):
        out.append(
            RectanglePrimitive(
                role="aim_point_marker",
                x=marker_x,
                y=y,
                width=marker_w,
                height=TOUCHDOWN_MARKER_HEIGHT_PX,
                style=_MARKING_STYLE,
            )
        )

    label_y = base + DISTANCE_LABEL_OFFSET_PX
    for dist in DISTANCE_STATIONS_FT:
        out.append(
            TextPrimitive(
                role="distance_label",
                x=pixel_x(dist, view),
                y=label_y,
                text=f"{dist}'",
                style=_DISTANCE_LABEL_STYLE,
            )
        )
    return out


def _height_grid(runway: RunwayGeometry, view: ViewSpace) -> list[GeometricPrimitive]:
    out: list[GeometricPrimitive] = []
    x1 = pixel_x(APPROACH_START_FT, view)
    x2 = pixel_x(runway.length_ft, view)
    for height in HEIGHT_STATIONS_FT:
        y = pixel_y(height, view)
        out.append(
            LinePrimitive(role="height_gridline", x1=x1, y1=y, x2=x2, y2=y, style=_GRID_STYLE)
        )
        out.append(
            TextPrimitive(
                role="height_label",
                x=HEIGHT_LABEL_X_PX,
                y=y,
                text=f"{height}'",
                style=_HEIGHT_LABEL_STYLE,
            )
        )
    return out


def _approach_path(config: ApproachConfiguration, view: ViewSpace) -> list[GeometricPrimitive]:
    """Glide path polyline plus the TCH and touchdown ticks."""
    tan_angle = tan_deg(config.glide_slope_angle_deg)
    tch = config.tch_feet
    aim = config.aim_point_feet

    # Extrapolate back along the slope from the threshold crossing.
    world = np.array(
        [
            [APPROACH_START_FT, tch + abs(APPROACH_START_FT) * tan_angle],
            [0.0, tch],
            [aim, 0.0],
        ]
    )
    pixels = to_pixels(world, view)
    points = tuple((float(x), float(y)) for x, y in pixels.tolist())

    tch_y = pixel_y(tch, view)
    aim_x = pixel_x(aim, view)
    return [
        PathPrimitive(role="approach_path", points=points, style=_PATH_STYLE),
        LinePrimitive(
            role="tch_tick", x1=0.0, y1=tch_y, x2=TCH_TICK_LENGTH_PX, y2=tch_y, style=_TICK_STYLE
        ),
        LinePrimitive(
            role="aim_point_tick",
            x1=aim_x,
            y1=view.baseline_y,
            x2=aim_x,
            y2=view.baseline_y + AIM_TICK_LENGTH_PX,
            style=_TICK_STYLE,
        ),
    ]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def project(
    config: ApproachConfiguration,
    runway: RunwayGeometry = DEFAULT_RUNWAY,
    view: ViewSpace = DEFAULT_VIEW,
) -> list[GeometricPrimitive]:
    """Build the full primitive list for a reconciled configuration.

    Order is stable (back to front): runway markings, height grid, approach
    path, TCH tick, aim-point tick. Primitives are regenerated on every call.
    """
    return [
        *_runway_markings(runway, view),
        *_height_grid(runway, view),
        *_approach_path(config, view),
    ]
