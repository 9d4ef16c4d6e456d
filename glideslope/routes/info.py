"""Info route — exposes runtime configuration to the browser UI.

GET /api/info returns the deployment, version, the input contract (slider
ranges and steps) and the fixed runway / view configuration, so the UI never
hard-codes limits the backend enforces.
"""

from __future__ import annotations

from fastapi import APIRouter, Request

from glideslope.geometry.projection import DEFAULT_RUNWAY, DEFAULT_VIEW
from glideslope.models import PARAMETER_RANGES, ApproachMode
from glideslope.settings import get_deployment

router = APIRouter(prefix="/api", tags=["info"])


@router.get("/info")
async def get_info(request: Request) -> dict:
    """Return runtime information about the current deployment.

    Response fields
    ---------------
    deployment : str
        ``"local"`` or ``"cloud"``.
    version : str
        Application version string sourced from the FastAPI app metadata.
    modes : list[str]
        Accepted values of the approach ``mode`` field.
    parameterRanges : list[dict]
        ``name``/``min``/``max``/``step``/``unit`` per input.
    runway, view : dict
        Fixed drawing configuration.
    """
    return {
        "deployment": get_deployment(),
        "version": request.app.version,
        "modes": [m.value for m in ApproachMode],
        "parameterRanges": [r.model_dump(by_alias=True) for r in PARAMETER_RANGES],
        "runway": DEFAULT_RUNWAY.model_dump(by_alias=True),
        "view": DEFAULT_VIEW.model_dump(by_alias=True),
    }
