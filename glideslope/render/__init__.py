"""Rendering backends for projected primitives.

Usage::

    from glideslope.render.svg import render_svg
"""

from __future__ import annotations
