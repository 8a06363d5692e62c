"""Error taxonomy for the guidance handler.

Every class maps to one HTTP outcome. Model output that is not JSON is not an
error here: the response parser returns a ``Fallback`` result instead.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from .schemas import ErrorResponse


class GuidanceError(Exception):
    status_code: int = 500

    def __init__(self, error: str, detail: Optional[str] = None) -> None:
        super().__init__(error if detail is None else f"{error}: {detail}")
        self.error = error
        self.detail = detail

    def to_body(self) -> Dict[str, Any]:
        return ErrorResponse(error=self.error, detail=self.detail).model_dump(exclude_none=True)


class RequestValidationError(GuidanceError):
    """Undecodable JSON body, missing ``query``, or a field pydantic rejects."""

    status_code = 400


class MethodNotAllowedError(GuidanceError):
    status_code = 405

    def __init__(self) -> None:
        super().__init__("method not allowed")


class ConfigurationError(GuidanceError):
    """Upstream credential missing. Answered with a degraded 200, not an HTTP error."""

    status_code = 200


class UpstreamError(GuidanceError):
    """Chat-completion call failed (non-2xx status or transport failure). Not retried."""

    status_code = 502

    def __init__(
        self, error: str, detail: Optional[str] = None, *, status: Optional[int] = None
    ) -> None:
        super().__init__(error, detail)
        self.status = status
