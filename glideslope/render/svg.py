"""SVG rendering of a primitive list.

A minimal rendering backend for the side-view diagram: one SVG element per
primitive, in order, so later primitives paint over earlier ones. Used by
POST /api/approach/svg and handy for eyeballing the projector output.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Sequence

from glideslope.geometry.projection import DEFAULT_VIEW, view_box
from glideslope.models import (
    GeometricPrimitive,
    LinePrimitive,
    PathPrimitive,
    RectanglePrimitive,
    Style,
    TextPrimitive,
    ViewSpace,
)

SVG_NS = "http://www.w3.org/2000/svg"


def _fmt(value: float) -> str:
    """Compact number formatting: 600.0 -> '600', 0.35 -> '0.35'."""
    return f"{value:.3f}".rstrip("0").rstrip(".")


def _style_attrs(style: Style) -> dict[str, str]:
    attrs: dict[str, str] = {}
    if style.fill is not None:
        attrs["fill"] = style.fill
    if style.stroke is not None:
        attrs["stroke"] = style.stroke
    if style.stroke_width is not None:
        attrs["stroke-width"] = _fmt(style.stroke_width)
    if style.dash:
        attrs["stroke-dasharray"] = ",".join(_fmt(d) for d in style.dash)
    if style.font_size is not None:
        attrs["font-size"] = _fmt(style.font_size)
    if style.text_anchor is not None:
        attrs["text-anchor"] = style.text_anchor
    if style.dominant_baseline is not None:
        attrs["dominant-baseline"] = style.dominant_baseline
    return attrs


def _path_data(points: Sequence[tuple[float, float]]) -> str:
    if not points:
        return ""
    (x0, y0), *rest = points
    parts = [f"M {_fmt(x0)} {_fmt(y0)}"]
    parts.extend(f"L {_fmt(x)} {_fmt(y)}" for x, y in rest)
    return " ".join(parts)


def _element(primitive: GeometricPrimitive) -> ET.Element:
    attrs = {"data-role": primitive.role}
    if isinstance(primitive, RectanglePrimitive):
        el = ET.Element("rect", attrs)
        el.set("x", _fmt(primitive.x))
        el.set("y", _fmt(primitive.y))
        el.set("width", _fmt(primitive.width))
        el.set("height", _fmt(primitive.height))
    elif isinstance(primitive, LinePrimitive):
        el = ET.Element("line", attrs)
        el.set("x1", _fmt(primitive.x1))
        el.set("y1", _fmt(primitive.y1))
        el.set("x2", _fmt(primitive.x2))
        el.set("y2", _fmt(primitive.y2))
    elif isinstance(primitive, PathPrimitive):
        el = ET.Element("path", attrs)
        el.set("d", _path_data(primitive.points))
    elif isinstance(primitive, TextPrimitive):
        el = ET.Element("text", attrs)
        el.set("x", _fmt(primitive.x))
        el.set("y", _fmt(primitive.y))
        el.text = primitive.text
    else:
        raise TypeError(f"Unsupported primitive: {type(primitive).__name__}")

    for key, value in _style_attrs(primitive.style).items():
        el.set(key, value)
    return el


def render_svg(
    primitives: Sequence[GeometricPrimitive],
    view: ViewSpace = DEFAULT_VIEW,
) -> str:
    """Serialise primitives into a standalone SVG document string."""
    min_x, min_y, width, height = view_box(view)
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "width": _fmt(width),
            "height": _fmt(height),
            "viewBox": " ".join(_fmt(v) for v in (min_x, min_y, width, height)),
        },
    )
    ET.SubElement(
        root,
        "rect",
        {
            "x": _fmt(min_x),
            "y": _fmt(min_y),
            "width": _fmt(width),
            "height": _fmt(height),
            "fill": "white",
        },
    )
    for primitive in primitives:
        root.append(_element(primitive))
    return ET.tostring(root, encoding="unicode")
