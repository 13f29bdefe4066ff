"""
chat_router.py — /api/chat endpoint
"""

from __future__ import annotations
import json
import logging

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from bodha.cerebras import UpstreamError
from bodha.chat_service import ChatService

logger = logging.getLogger("bodha.router")
router = APIRouter()


class BadRequest(ValueError):
    pass


def error(msg: str) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": msg})


async def read_message(req: Request) -> str:
    raw = await req.body()
    try:
        body = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise BadRequest(f"Invalid JSON: {exc}") from exc
    if not isinstance(body, dict):
        raise BadRequest("Invalid JSON: expected an object")

    message = body.get("message")
    if message is None:
        message = ""
    if not isinstance(message, str):
        raise BadRequest("Invalid JSON: message must be a string")
    if message == "":
        raise BadRequest("Message is required")
    return message


@router.options("")
async def preflight():
    return Response(status_code=200)


@router.post("")
async def chat(req: Request):
    try:
        message = await read_message(req)
    except BadRequest as exc:
        return error(str(exc))

    service: ChatService = req.app.state.chat
    try:
        reply = await service.exchange(message)
    except UpstreamError as exc:
        logger.warning("Upstream failure: %s", exc)
        return error(str(exc))
    except Exception as exc:
        logger.exception("Chat processing failed: %s", exc)
        return error(f"Internal error: {exc}")

    return {"reply": reply}
