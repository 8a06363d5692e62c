from __future__ import annotations

from contextlib import asynccontextmanager
import time
import uuid

from fastapi import APIRouter, FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import AppSettings
from .guidance import (
    build_guidance_service,
    guidance_http_exception_handler,
    router_guidance,
)
from .guidance.schemas import HealthResponse, ReadyResponse
from .metrics import REQUEST_COUNT, REQUEST_LATENCY, render_metrics
from .utils import get_logger

logger = get_logger("api")

router_ops = APIRouter(tags=["ops"])


async def request_context_middleware(request: Request, call_next):
    rid = request.headers.get("x-request-id", str(uuid.uuid4()))
    request.state.request_id = rid
    started = time.time()
    request_path = request.url.path

    response = await call_next(request)
    response.headers["x-request-id"] = rid
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["Referrer-Policy"] = "no-referrer"

    latency_ms = round((time.time() - started) * 1000.0, 2)
    logger.info(
        "request path=%s method=%s status=%s latency_ms=%s",
        request_path,
        request.method,
        response.status_code,
        latency_ms,
        extra={"request_id": rid},
    )
    REQUEST_COUNT.labels(
        path=request_path, method=request.method, status=str(response.status_code)
    ).inc()
    REQUEST_LATENCY.labels(path=request_path, method=request.method).observe(
        (time.time() - started)
    )
    return response


@router_ops.get("/health")
def health() -> HealthResponse:
    return HealthResponse(status="ok", service="alive")


@router_ops.get("/ready")
def ready(request: Request):
    settings: AppSettings = request.app.state.settings
    mode = settings.guidance_mode
    credential = bool(settings.completion.api_key)
    degraded = mode == "llm" and not credential
    body = ReadyResponse(
        status="degraded" if degraded else "ok",
        mode=mode,
        model=settings.completion.model if mode == "llm" else None,
        credential_configured=credential,
    )
    return JSONResponse(status_code=503 if degraded else 200, content=body.model_dump())


@router_ops.get("/metrics")
def metrics() -> Response:
    payload, content_type = render_metrics()
    return Response(content=payload, media_type=content_type)


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Build the API for one deployment mode. Settings are resolved once, here."""
    settings = settings or AppSettings()
    service = build_guidance_service(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Guidance API starting mode=%s", settings.guidance_mode)
        if settings.guidance_mode == "llm" and not settings.completion.api_key:
            logger.warning(
                "OPENAI_API_KEY is not set; /api/the-well will answer with a degraded payload"
            )
        yield
        # Close the outbound connection pool
        await service.aclose()

    app = FastAPI(
        title="The Well Guidance API",
        version="1.0.0",
        description=(
            "Classifies a question's intent and returns a structured guidance payload, "
            "either from curated static content or from one schema-constrained "
            "chat-completion call."
        ),
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.guidance = service
    app.middleware("http")(request_context_middleware)
    app.add_exception_handler(StarletteHTTPException, guidance_http_exception_handler)
    app.include_router(router_ops)
    app.include_router(router_guidance)
    return app


app = create_app()
