"""/ws/approach — WebSocket channel for live slider updates.

Connection lifecycle:
1. Client opens ws://host:8000/ws/approach
2. Client sends configuration JSON (ApproachRequest) on each input change
3. Server answers the latest configuration with a result frame
   ``{"type": "result", ...ApproachResult}`` (last-write-wins)
4. Bad input gets an error frame ``{"type": "error", "error", "detail"}``;
   the connection stays open
5. On disconnect both tasks wind down

Concurrency model:
- A task group runs two concurrent tasks: a reader and a responder.
- The reader receives messages, validates them, and posts configurations
  to a memory channel. Error frames are sent straight from the reader.
- The responder drains the channel down to the newest configuration, so a
  burst of slider events produces one answer instead of a backlog.
- A lock protects ws.send_text to prevent interleaved frames.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import anyio
from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from glideslope.geometry.engine import build_approach_result
from glideslope.models import ApproachConfiguration, ApproachRequest, ApproachResult

logger = logging.getLogger("glideslope.ws")

router = APIRouter()

# Maximum accepted WebSocket message size (bytes). A configuration is a few
# hundred bytes; anything near this limit is not a legitimate client.
MAX_MESSAGE_SIZE = 64 * 1024  # 64 KB


def _build_error_frame(error: str, detail: str = "", field: str = "") -> str:
    """Build an error text frame."""
    payload: dict[str, str] = {"type": "error", "error": error}
    if detail:
        payload["detail"] = detail
    if field:
        payload["field"] = field
    return json.dumps(payload)


def _build_result_frame(result: ApproachResult) -> str:
    """Serialize a result with camelCase keys (see models.CamelModel)."""
    payload: dict[str, Any] = {"type": "result"}
    payload.update(result.model_dump(mode="json", by_alias=True))
    return json.dumps(payload)


def _validation_detail(exc: ValidationError) -> str:
    """First few ``loc: msg`` pairs of a pydantic error, joined."""
    detail_parts = []
    for err in exc.errors()[:5]:
        loc = ".".join(str(part) for part in err["loc"])
        detail_parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(detail_parts)


class FrameError(Exception):
    """A client message that cannot be turned into a configuration."""

    def __init__(self, error: str, detail: str = "") -> None:
        super().__init__(error)
        self.error = error
        self.detail = detail

    def to_frame(self) -> str:
        return _build_error_frame(error=self.error, detail=self.detail)


def _check_size(size: int) -> None:
    if size > MAX_MESSAGE_SIZE:
        raise FrameError("Message too large", f"Maximum message size is {MAX_MESSAGE_SIZE} bytes")


def parse_message(message: dict[str, Any]) -> ApproachConfiguration | None:
    """Turn one ASGI receive message into a validated configuration.

    Returns None for a message that carries no payload.

    Raises:
        FrameError: Oversized, non-UTF-8, malformed or out-of-range input.
    """
    text = message.get("text")
    if text is None:
        raw_bytes = message.get("bytes")
        if raw_bytes is None:
            return None
        _check_size(len(raw_bytes))
        try:
            text = raw_bytes.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise FrameError("Invalid message format", "Expected UTF-8 encoded JSON text") from exc
    _check_size(len(text.encode("utf-8", errors="replace")))

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise FrameError("Invalid JSON", str(exc)) from exc
    if not isinstance(data, dict):
        raise FrameError("Validation error", "Expected a JSON object")

    try:
        request = ApproachRequest.model_validate(data)
    except ValidationError as exc:
        raise FrameError("Validation error", _validation_detail(exc)) from exc
    return request.to_configuration()


@router.websocket("/ws/approach")
async def approach_websocket(ws: WebSocket) -> None:
    """Handle a single WebSocket connection for live recomputation."""
    await ws.accept()
    logger.info("WebSocket client connected")

    send_ch, recv_ch = anyio.create_memory_object_stream[ApproachConfiguration](
        max_buffer_size=16
    )
    ws_lock = anyio.Lock()

    async def _send_frame(frame: str) -> None:
        """Send a text frame to the WebSocket, protected by lock."""
        async with ws_lock:
            await ws.send_text(frame)

    def _post_latest(config: ApproachConfiguration) -> None:
        try:
            send_ch.send_nowait(config)
        except anyio.WouldBlock:
            # Channel full: drop the backlog, keep the newest.
            while True:
                try:
                    recv_ch.receive_nowait()
                except anyio.WouldBlock:
                    break
            send_ch.send_nowait(config)

    async def reader_task() -> None:
        """Read messages from the WebSocket and post validated configurations."""
        try:
            while True:
                try:
                    message = await ws.receive()
                except WebSocketDisconnect:
                    return
                if message.get("type") == "websocket.disconnect":
                    return

                try:
                    config = parse_message(message)
                except FrameError as exc:
                    logger.warning("Rejected client message: %s (%s)", exc.error, exc.detail)
                    await _send_frame(exc.to_frame())
                    continue
                if config is not None:
                    _post_latest(config)
        finally:
            send_ch.close()

    async def responder_task() -> None:
        """Answer the most recent configuration in the channel."""
        async for config in recv_ch:
            latest = config
            while True:
                try:
                    latest = recv_ch.receive_nowait()
                except anyio.WouldBlock:
                    break
                except anyio.EndOfStream:
                    break

            try:
                frame = _build_result_frame(build_approach_result(latest))
            except Exception as exc:
                logger.exception("Approach computation failed")
                frame = _build_error_frame(error="Computation failed", detail=str(exc))

            try:
                await _send_frame(frame)
            except Exception:
                return

    try:
        async with anyio.create_task_group() as tg:
            tg.start_soon(reader_task)
            tg.start_soon(responder_task)
    except WebSocketDisconnect:
        logger.info("WebSocket client disconnected")
    except Exception:
        logger.exception("WebSocket error")
    else:
        logger.info("WebSocket client disconnected")
