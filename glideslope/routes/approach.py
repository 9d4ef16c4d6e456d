"""POST /api/approach — reconcile an approach and project it for rendering.

Stateless: the client sends the full configuration on every input change
and receives the reconciled configuration, the derived display values,
advisory warnings and the primitive list. Use /ws/approach for live slider
updates over a single connection.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Response

from glideslope.geometry.engine import build_approach_result, reconcile, toggle_mode
from glideslope.geometry.projection import DEFAULT_VIEW, project
from glideslope.models import ApproachRequest, ApproachResult
from glideslope.render.svg import render_svg

logger = logging.getLogger("glideslope.approach")

router = APIRouter(prefix="/api/approach", tags=["approach"])


@router.post("", response_model=ApproachResult, response_model_by_alias=True)
async def compute_approach(request: ApproachRequest) -> ApproachResult:
    """Reconcile dependent values and return the projected diagram."""
    try:
        return build_approach_result(request.to_configuration())
    except Exception as exc:
        logger.exception("Approach computation failed")
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.post("/toggle-mode", response_model=ApproachResult, response_model_by_alias=True)
async def toggle_approach_mode(request: ApproachRequest) -> ApproachResult:
    """Switch between fixed-TCH and fixed-aim-point.

    The body is the configuration *before* the toggle. Its dependent value
    is brought up to date first, then becomes the new independent value,
    even when that value lies outside the slider band of its new role.
    """
    try:
        toggled = toggle_mode(reconcile(request.to_configuration()))
        logger.debug(
            "Mode %s -> %s (tch=%g ft, aim=%g ft)",
            request.mode.value,
            toggled.mode.value,
            toggled.tch_feet,
            toggled.aim_point_feet,
        )
        return build_approach_result(toggled)
    except Exception as exc:
        logger.exception("Mode toggle failed")
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.post(
    "/svg",
    response_class=Response,
    responses={200: {"content": {"image/svg+xml": {}}}},
)
async def render_approach_svg(request: ApproachRequest) -> Response:
    """Render the side-view diagram as a standalone SVG document."""
    try:
        reconciled = reconcile(request.to_configuration())
        svg = render_svg(project(reconciled), DEFAULT_VIEW)
    except Exception as exc:
        logger.exception("SVG rendering failed")
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return Response(content=svg, media_type="image/svg+xml")
