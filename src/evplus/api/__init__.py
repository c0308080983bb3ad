"""REST API for the EVPlus backend."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

import httpx
from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from evplus.api.schemas import ErrorResponse
from evplus.config import Settings, load_settings
from evplus.errors import PropsError
from evplus.export import render_props_pdf
from evplus.ingest import fetch_props
from evplus.models import PropRecord


logger = logging.getLogger("uvicorn.error")
logger.setLevel(logging.INFO)

BANNER = "EVPlus Backend is running!"
DEFAULT_LEAGUE = "nba"

_ERROR_RESPONSES = {500: {"model": ErrorResponse}}


def pdf_filename(league: str, *, now: Optional[datetime] = None) -> str:
    stamp = (now or datetime.now(timezone.utc)).astimezone(timezone.utc).strftime("%Y-%m-%d")
    return f"prizepicks_{league}_{stamp}.pdf"


def create_app(
    settings: Optional[Settings] = None,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Build the application.

    ``transport`` replaces the network transport of the outbound client, which
    lets tests serve projections from an ``httpx.MockTransport``.
    """

    settings = settings or load_settings()
    app = FastAPI(title="EVPlus backend")
    app.state.settings = settings
    app.state.upstream_transport = transport
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.exception_handler(PropsError)
    async def props_error_handler(request: Request, exc: PropsError) -> JSONResponse:
        logger.exception("%s %s failed", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": str(exc) or exc.__class__.__name__})

    async def load_props(league: str) -> list[PropRecord]:
        upstream = settings.upstream
        async with httpx.AsyncClient(transport=app.state.upstream_transport, timeout=upstream.timeout) as client:
            return await fetch_props(league, client=client, settings=upstream)

    @app.get("/", response_class=PlainTextResponse)
    async def index() -> str:
        return BANNER

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/api/props", response_model=list[PropRecord], responses=_ERROR_RESPONSES)
    async def list_props(league: str = Query(DEFAULT_LEAGUE)) -> list[PropRecord]:
        league = league.strip() or DEFAULT_LEAGUE
        return await load_props(league)

    @app.get(
        "/api/generate-pdf",
        response_class=Response,
        responses={200: {"content": {"application/pdf": {}}}, **_ERROR_RESPONSES},
    )
    async def generate_pdf(league: str = Query(DEFAULT_LEAGUE)) -> Response:
        league = league.strip() or DEFAULT_LEAGUE
        props = await load_props(league)
        content = render_props_pdf(league, props)
        return Response(
            content=content,
            media_type="application/pdf",
            headers={"Content-Disposition": f"attachment; filename={pdf_filename(league)}"},
        )

    return app
