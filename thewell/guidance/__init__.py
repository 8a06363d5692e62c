from .router import guidance_http_exception_handler, router_guidance
from .service import (
    GuidanceService,
    LLMGuidanceService,
    StaticGuidanceService,
    build_guidance_service,
)

__all__ = [
    "router_guidance",
    "guidance_http_exception_handler",
    "GuidanceService",
    "LLMGuidanceService",
    "StaticGuidanceService",
    "build_guidance_service",
]
