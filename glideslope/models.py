"""Pydantic models — shared contract between all glideslope modules.

API Naming Contract:
  - Python code uses snake_case field names.
  - The browser UI expects camelCase. Every model serialized to the client
    inherits CamelModel, so model.model_dump(by_alias=True) produces camelCase
    keys, and both spellings are accepted on input (populate_by_name=True).

Range enforcement lives here: the input contract (angle 2-7°, ground speed
40-70 kt, TCH 20-100 ft, aim point 500-1500 ft) is validated by
ApproachRequest before client input ever reaches the geometry engine.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator
from pydantic.alias_generators import to_camel


# ---------------------------------------------------------------------------
# Input contract
# ---------------------------------------------------------------------------

GLIDE_SLOPE_MIN_DEG = 2.0
GLIDE_SLOPE_MAX_DEG = 7.0
GROUND_SPEED_MIN_KT = 40.0
GROUND_SPEED_MAX_KT = 70.0
TCH_MIN_FT = 20.0
TCH_MAX_FT = 100.0
AIM_POINT_MIN_FT = 500.0
AIM_POINT_MAX_FT = 1500.0


class ApproachMode(str, Enum):
    """Which of TCH / aim point is the independent (driving) variable."""

    TCH_FIXED = "tch"
    AIM_POINT_FIXED = "aimpoint"

    @property
    def other(self) -> ApproachMode:
        if self is ApproachMode.TCH_FIXED:
            return ApproachMode.AIM_POINT_FIXED
        return ApproachMode.TCH_FIXED


# ---------------------------------------------------------------------------
# Base model for camelCase serialization
# ---------------------------------------------------------------------------

class CamelModel(BaseModel):
    """Base for models serialized to the client with camelCase keys."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class ParameterRange(CamelModel):
    """One row of the input contract, published for UI sliders."""

    name: str
    min: float
    max: float
    step: float
    unit: str


PARAMETER_RANGES: tuple[ParameterRange, ...] = (
    ParameterRange(name="glide_slope_angle_deg", min=GLIDE_SLOPE_MIN_DEG,
                   max=GLIDE_SLOPE_MAX_DEG, step=0.1, unit="deg"),
    ParameterRange(name="ground_speed_knots", min=GROUND_SPEED_MIN_KT,
                   max=GROUND_SPEED_MAX_KT, step=1, unit="kt"),
    ParameterRange(name="tch_feet", min=TCH_MIN_FT, max=TCH_MAX_FT, step=1, unit="ft"),
    ParameterRange(name="aim_point_feet", min=AIM_POINT_MIN_FT,
                   max=AIM_POINT_MAX_FT, step=100, unit="ft"),
)


# ---------------------------------------------------------------------------
# ApproachConfiguration
# ---------------------------------------------------------------------------

class ApproachConfiguration(CamelModel):
    """Approach parameters. Immutable; the engine returns new instances.

    Neither TCH nor aim point is held to its slider band here. A derived
    value may legitimately fall outside it (7° with a 1500 ft aim point gives
    a 184 ft TCH), and a mode toggle carries that value over as the new
    independent one. Client input goes through ``ApproachRequest``.
    """

    model_config = ConfigDict(frozen=True)

    mode: ApproachMode = ApproachMode.TCH_FIXED
    glide_slope_angle_deg: float = Field(
        default=3.0, ge=GLIDE_SLOPE_MIN_DEG, le=GLIDE_SLOPE_MAX_DEG
    )
    ground_speed_knots: float = Field(
        default=55.0, ge=GROUND_SPEED_MIN_KT, le=GROUND_SPEED_MAX_KT
    )
    tch_feet: float = Field(default=50.0, ge=0)
    aim_point_feet: float = Field(default=1000.0, ge=0)
    # Derived; overwritten by reconcile().
    vertical_speed_fpm: int = 0


class ApproachRequest(ApproachConfiguration):
    """Configuration as submitted by a client (REST body, WebSocket frame).

    Adds the slider-band check on whichever field is independent for the
    mode. The dependent field only has to be non-negative.
    """

    @model_validator(mode="after")
    def check_independent_range(self) -> ApproachRequest:
        if self.mode is ApproachMode.TCH_FIXED:
            if not TCH_MIN_FT <= self.tch_feet <= TCH_MAX_FT:
                raise ValueError(
                    f"tch_feet must be between {TCH_MIN_FT:g} and {TCH_MAX_FT:g} "
                    f"when TCH is fixed (got {self.tch_feet:g})"
                )
        elif not AIM_POINT_MIN_FT <= self.aim_point_feet <= AIM_POINT_MAX_FT:
            raise ValueError(
                f"aim_point_feet must be between {AIM_POINT_MIN_FT:g} and "
                f"{AIM_POINT_MAX_FT:g} when the aim point is fixed "
                f"(got {self.aim_point_feet:g})"
            )
        return self

    def to_configuration(self) -> ApproachConfiguration:
        return ApproachConfiguration(**self.model_dump())


# ---------------------------------------------------------------------------
# Fixed drawing configuration
# ---------------------------------------------------------------------------

class RunwayGeometry(CamelModel):
    """Modelled runway dimensions (feet). Fixed for the process lifetime."""

    model_config = ConfigDict(frozen=True)

    length_ft: float = 2000.0
    width_ft: float = 40.0
    stripe_count: int = Field(default=4, ge=1)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def stripe_width_ft(self) -> float:
        # Stripes alternate with gaps of equal width: n stripes, n-1 gaps.
        return self.width_ft / (2 * self.stripe_count - 1)


class ViewSpace(CamelModel):
    """Pixel-space configuration of the side-view diagram."""

    model_config = ConfigDict(frozen=True)

    width_px: float = 600.0
    height_px: float = 600.0
    horizontal_scale: float = Field(default=0.3, gt=0)  # px per ft
    vertical_scale: float = Field(default=1.5, gt=0)    # px per ft
    baseline_offset_px: float = 100.0
    origin_x_px: float = -100.0

    @property
    def baseline_y(self) -> float:
        """Pixel Y of the runway surface (world height 0)."""
        return self.height_px - self.baseline_offset_px


# ---------------------------------------------------------------------------
# Geometric primitives
# ---------------------------------------------------------------------------

PrimitiveRole = Literal[
    "runway_surface",
    "threshold_stripe",
    "centerline",
    "aim_point_marker",
    "distance_label",
    "height_gridline",
    "height_label",
    "approach_path",
    "tch_tick",
    "aim_point_tick",
]


class Style(CamelModel):
    model_config = ConfigDict(frozen=True)

    fill: str | None = None
    stroke: str | None = None
    stroke_width: float | None = None
    dash: tuple[float, ...] | None = None
    font_size: float | None = None
    text_anchor: Literal["start", "middle", "end"] | None = None
    dominant_baseline: Literal["auto", "middle", "hanging"] | None = None


class RectanglePrimitive(CamelModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["rect"] = "rect"
    role: PrimitiveRole
    x: float
    y: float
    width: float
    height: float
    style: Style = Field(default_factory=Style)


class LinePrimitive(CamelModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["line"] = "line"
    role: PrimitiveRole
    x1: float
    y1: float
    x2: float
    y2: float
    style: Style = Field(default_factory=Style)


class PathPrimitive(CamelModel):
    """Open polyline through ``points`` in order."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["path"] = "path"
    role: PrimitiveRole
    points: tuple[tuple[float, float], ...]
    style: Style = Field(default_factory=Style)


class TextPrimitive(CamelModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    role: PrimitiveRole
    x: float
    y: float
    text: str
    style: Style = Field(default_factory=Style)


GeometricPrimitive = Annotated[
    Union[RectanglePrimitive, LinePrimitive, PathPrimitive, TextPrimitive],
    Field(discriminator="kind"),
]


# ---------------------------------------------------------------------------
# Derived values / warnings / results
# ---------------------------------------------------------------------------

class DerivedValues(CamelModel):
    """Display values for the label layer."""

    dependent_field: Literal["tch_feet", "aim_point_feet"]
    dependent_value_feet: float
    vertical_speed_fpm: int


class ApproachWarning(CamelModel):
    """Non-blocking advisory warning."""

    id: str  # A01-A04
    level: Literal["warn"] = "warn"
    message: str
    fields: list[str] = Field(default_factory=list)


class ViewBox(CamelModel):
    min_x: float
    min_y: float
    width: float
    height: float


class ApproachResult(CamelModel):
    """Response from POST /api/approach and the /ws/approach channel."""

    configuration: ApproachConfiguration
    derived: DerivedValues
    warnings: list[ApproachWarning] = Field(default_factory=list)
    view_box: ViewBox
    primitives: list[GeometricPrimitive] = Field(default_factory=list)
