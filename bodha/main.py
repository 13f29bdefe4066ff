"""
Application bootstrap
Only the /api/chat router is exposed, plus a sanity ping at /.
"""

from __future__ import annotations
import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import httpx
import uvicorn
from fastapi import FastAPI
from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import Response

from bodha import __version__
from bodha.cerebras import CerebrasClient
from bodha.chat_router import router as chat_router
from bodha.chat_service import ChatService
from bodha.memory import Transcript
from bodha.personas import load_system_prompt
from bodha.settings import Settings, get_settings

logger = logging.getLogger("bodha")


class PreflightCORSMiddleware(CORSMiddleware):
    """
    Allow-list CORS where a preflight always gets an empty 200.
    Origins off the list just don't get Access-Control-Allow-Origin.
    """

    def preflight_response(self, request_headers: Headers) -> Response:
        headers = dict(self.preflight_headers)
        origin = request_headers["origin"]
        if self.is_allowed_origin(origin=origin):
            headers["Access-Control-Allow-Origin"] = origin
        return Response(status_code=200, headers=headers)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format="[%(asctime)s] %(levelname)s - %(message)s")


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    # persona
    transcript = Transcript(load_system_prompt(settings.system_prompt_file), settings.max_turns)
    http = httpx.AsyncClient(timeout=settings.upstream_timeout, transport=transport)
    client = CerebrasClient(
        http,
        settings.api_key,
        url=settings.api_url,
        model=settings.model,
        sampling=settings.sampling(),
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not settings.api_key:
            raise RuntimeError("Missing CEREBRAS_API_KEY environment variable")
        logger.info("Config: model=%s url=%s origins=%s", settings.model, settings.api_url, settings.allowed_origins)
        yield
        await http.aclose()

    app = FastAPI(title="Bodha Relay", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.chat = ChatService(client, transcript)

    # ─────────────────────────── CORS ────────────────────────────
    app.add_middleware(
        PreflightCORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["POST", "GET", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    # ──────────────────────────────────────────────────────────────

    app.include_router(chat_router, prefix="/api/chat")

    @app.get("/")                       # sanity ping
    def root():
        return {"status": "Bodha relay running"}

    return app


def main() -> None:
    settings = get_settings()
    if not settings.api_key:
        print("Missing CEREBRAS_API_KEY environment variable", file=sys.stderr)
        sys.exit(1)

    app = create_app(settings)
    logger.info("Starting server on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
