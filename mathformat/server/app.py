from __future__ import annotations

import os
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, Response
from loguru import logger
from pydantic import BaseModel, Field

from mathformat import config
from mathformat.converter import convert
from mathformat.errors import ExportError
from mathformat.export.docx_export import DOCX_MEDIA_TYPE, document_bytes
from mathformat.render.preview import render_preview_html
from mathformat.tex.detector import detect_patterns


class ExpressionRequest(BaseModel):
    input: str = Field(
        "", description="Expression as typed, e.g. G_μν + Λg_μν = c^4/(8πG) T_μν"
    )


app = FastAPI(title="Math Expression Formatter", version="0.1.0")

# ---------------------------------------------------------------------------
# CORS
#
# Env vars (preferred in prod):
# - MATHFORMAT_CORS_ALLOW_ORIGINS="https://app.example.com,https://staging.example.com"
# - MATHFORMAT_CORS_ALLOW_ORIGIN_REGEX="https://.*\\.example\\.com"
#
# Without either, any localhost origin is allowed.
# ---------------------------------------------------------------------------


def _cors_allow_origins_from_env() -> list[str] | None:
    raw = (os.getenv("MATHFORMAT_CORS_ALLOW_ORIGINS") or "").strip()
    if not raw:
        return None
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or None


def _cors_allow_origin_regex_from_env() -> str | None:
    raw = (os.getenv("MATHFORMAT_CORS_ALLOW_ORIGIN_REGEX") or "").strip()
    return raw or None


cors_allow_origins = _cors_allow_origins_from_env()
cors_allow_origin_regex = _cors_allow_origin_regex_from_env()

if cors_allow_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_allow_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
else:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[],
        # Raw regex string; matches e.g. "http://localhost:3000".
        allow_origin_regex=cors_allow_origin_regex
        or r"https?://(localhost|127\.0\.0\.1):\d+",
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/convert")
async def convert_expression(req: ExpressionRequest) -> dict[str, Any]:
    return convert(req.input).to_dict()


@app.post("/detect")
async def detect(req: ExpressionRequest) -> dict[str, bool]:
    return detect_patterns(req.input).to_dict()


@app.post("/export")
async def export(req: ExpressionRequest) -> Response:
    result = convert(req.input)
    try:
        payload = document_bytes(result.input, result.latex)
    except ExportError as e:
        logger.error(f"Word export failed: {e}")
        raise HTTPException(status_code=500, detail=str(e)) from e

    return Response(
        content=payload,
        media_type=DOCX_MEDIA_TYPE,
        headers={
            "Content-Disposition": (
                f'attachment; filename="{config.DEFAULT_EXPORT_FILENAME}"'
            )
        },
    )


@app.get("/preview", response_class=HTMLResponse)
async def preview(input: str = "", dark: bool = False) -> HTMLResponse:
    return HTMLResponse(render_preview_html(convert(input), dark=dark))
