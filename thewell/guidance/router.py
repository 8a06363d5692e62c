from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import APIRouter, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .errors import GuidanceError, MethodNotAllowedError, RequestValidationError
from .schemas import GuidanceRequest
from .service import GuidanceService

logger = logging.getLogger(__name__)

router_guidance = APIRouter(tags=["guidance"])

GUIDANCE_PATH = "/api/the-well"


class Utf8JSONResponse(JSONResponse):
    media_type = "application/json; charset=utf-8"

    def render(self, content: Any) -> bytes:
        # ASCII escapes keep lone surrogates from model text encodable.
        return json.dumps(
            content,
            ensure_ascii=True,
            allow_nan=False,
            indent=None,
            separators=(",", ":"),
        ).encode("utf-8")


def cors_headers(origin: str, *, no_store: bool) -> dict[str, str]:
    headers = {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Methods": "POST, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
        "Vary": "Origin",
    }
    if no_store:
        headers["Cache-Control"] = "no-store"
    return headers


def get_guidance_service(request: Request) -> GuidanceService:
    return request.app.state.guidance


def _request_cors_headers(request: Request) -> dict[str, str]:
    origin = request.headers.get("origin") or "*"
    return cors_headers(origin, no_store=get_guidance_service(request).no_store)


def error_response(request: Request, exc: GuidanceError) -> Response:
    return Utf8JSONResponse(
        exc.to_body(), status_code=exc.status_code, headers=_request_cors_headers(request)
    )


async def parse_guidance_request(request: Request) -> GuidanceRequest:
    raw = await request.body()
    try:
        body: Any = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        raise RequestValidationError("invalid json") from exc

    query = body.get("query") if isinstance(body, dict) else None
    if not query or not isinstance(query, str):
        raise RequestValidationError("query required")
    try:
        return GuidanceRequest.model_validate(body)
    except ValidationError as exc:
        raise RequestValidationError("invalid request", exc.errors()[0]["msg"]) from exc


@router_guidance.api_route(GUIDANCE_PATH, methods=["POST", "OPTIONS"], include_in_schema=False)
async def the_well(request: Request) -> Response:
    """Guidance handler: OPTIONS preflight, POST question → GuidancePayload JSON."""
    service = get_guidance_service(request)
    headers = _request_cors_headers(request)

    if request.method.upper() == "OPTIONS":
        return Response(status_code=204, headers=headers)

    try:
        guidance_request = await parse_guidance_request(request)
        payload = await service.answer(guidance_request)
    except GuidanceError as exc:
        if exc.status_code >= 500:
            logger.warning("Guidance request failed: %s", exc)
        return error_response(request, exc)

    return Utf8JSONResponse(payload, status_code=200, headers=headers)


async def guidance_http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Answer every other method on the guidance path with its own 405 body."""
    if exc.status_code == 405 and request.url.path == GUIDANCE_PATH:
        return error_response(request, MethodNotAllowedError())
    return await http_exception_handler(request, exc)
