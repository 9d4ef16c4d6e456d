"""Runtime configuration read from environment variables.

GLIDESLOPE_DEPLOYMENT
    ``local`` (default) — developer machine, browser UI on the Vite dev server.
    ``cloud``           — served behind a public origin; CORS open to all.
GLIDESLOPE_CORS_ORIGINS
    Comma-separated origin list. Overrides the deployment default.
GLIDESLOPE_LOG_LEVEL
    Level name for the ``glideslope`` logger (default ``INFO``).
"""

from __future__ import annotations

import logging
import os
from typing import Literal

logger = logging.getLogger("glideslope.settings")

Deployment = Literal["local", "cloud"]
_VALID_DEPLOYMENTS: frozenset[str] = frozenset({"local", "cloud"})

LOCAL_CORS_ORIGINS: list[str] = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]


def get_deployment() -> Deployment:
    """Return the current deployment, defaulting to ``'local'``.

    Unrecognised values fall back to ``'local'`` with a warning so that a
    misconfigured deployment never silently opens CORS.
    """
    raw = os.environ.get("GLIDESLOPE_DEPLOYMENT", "local").strip().lower()
    if raw not in _VALID_DEPLOYMENTS:
        logger.warning(
            "Unknown GLIDESLOPE_DEPLOYMENT=%r — falling back to 'local'. "
            "Valid values are: %s",
            raw,
            ", ".join(sorted(_VALID_DEPLOYMENTS)),
        )
        return "local"
    return raw  # type: ignore[return-value]


def get_cors_origins() -> list[str]:
    """Allowed CORS origins for the current environment.

    An explicit GLIDESLOPE_CORS_ORIGINS wins; otherwise ``cloud`` allows
    ``*`` and ``local`` allows only the dev server.
    """
    raw = os.environ.get("GLIDESLOPE_CORS_ORIGINS", "")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    if origins:
        return origins
    if get_deployment() == "cloud":
        return ["*"]
    return list(LOCAL_CORS_ORIGINS)


def get_log_level() -> int:
    """Numeric log level from GLIDESLOPE_LOG_LEVEL, ``INFO`` if unset or unknown."""
    name = os.environ.get("GLIDESLOPE_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        logger.warning("Unknown GLIDESLOPE_LOG_LEVEL=%r — using INFO", name)
        return logging.INFO
    return level
