"""FastAPI application — entry point for the glide slope calculator backend.

Registers route modules, configures logging and CORS, serves the health
endpoint, and mounts static files for the SPA frontend when present.

GLIDESLOPE_DEPLOYMENT controls CORS defaults:
  local (default) — only the Vite dev server on localhost:5173
  cloud           — all origins, no credentials
GLIDESLOPE_CORS_ORIGINS overrides either default.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from glideslope import __version__
from glideslope.routes.approach import router as approach_router
from glideslope.routes.info import router as info_router
from glideslope.routes.websocket import router as websocket_router
from glideslope.settings import get_cors_origins, get_deployment, get_log_level

logger = logging.getLogger("glideslope")
logger.setLevel(get_log_level())

DEPLOYMENT = get_deployment()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the effective configuration once at startup."""
    logger.info(
        "Glide slope calculator %s starting (deployment=%s, cors=%s)",
        app.version,
        DEPLOYMENT,
        ", ".join(_allow_origins),
    )
    yield


app = FastAPI(title="Glide Slope Calculator", version=__version__, lifespan=lifespan)

# ---------------------------------------------------------------------------
# CORS — allow_credentials is invalid together with a wildcard origin
# ---------------------------------------------------------------------------
_allow_origins = get_cors_origins()
_allow_all = _allow_origins == ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allow_origins,
    allow_credentials=not _allow_all,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# API route registration
# ---------------------------------------------------------------------------
app.include_router(approach_router)
app.include_router(info_router)
app.include_router(websocket_router)


# ---------------------------------------------------------------------------
# Health check (before static mount so it is not shadowed)
# ---------------------------------------------------------------------------


@app.get("/health")
async def health() -> dict:
    """Health check endpoint."""
    return {"status": "ok", "version": app.version, "deployment": DEPLOYMENT}


# ---------------------------------------------------------------------------
# Static files mount MUST be last — catches all unmatched routes and
# serves index.html for SPA client-side routing.
# ---------------------------------------------------------------------------
_static_dir = Path("static")
if _static_dir.is_dir():
    app.mount("/", StaticFiles(directory="static", html=True), name="static")
