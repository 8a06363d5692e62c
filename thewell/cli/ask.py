"""CLI: ask command. Runs one question through the guidance pipeline and prints the payload."""

from __future__ import annotations

import asyncio
import dataclasses
import json
from typing import Any

from ..config import AppSettings
from ..guidance import build_guidance_service
from ..guidance.schemas import GuidanceRequest
from ..utils import get_logger

logger = get_logger("cli_ask")


async def _answer(settings: AppSettings, request: GuidanceRequest) -> dict[str, Any]:
    service = build_guidance_service(settings)
    try:
        return await service.answer(request)
    finally:
        await service.aclose()


def cmd_ask(
    query: str,
    *,
    mode_tag: str | None = None,
    static: bool = False,
    settings: AppSettings | None = None,
) -> dict[str, Any]:
    settings = settings or AppSettings()
    if static:
        settings = dataclasses.replace(
            settings,
            server=dataclasses.replace(settings.server, guidance_mode="static"),
        )
    request = GuidanceRequest(query=query, mode=mode_tag)
    logger.info("Asking in mode=%s", settings.guidance_mode)
    payload = asyncio.run(_answer(settings, request))
    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return payload
