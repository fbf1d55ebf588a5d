"""Typed async client for the playground API.

Wraps httpx and returns Result values: 2xx bodies are parsed into the
response models, error statuses become Err(AppError).
"""

from types import TracebackType
from typing import Self

import httpx
from pydantic import BaseModel

from api.config import settings
from api.logging_config import get_client_logger
from api.models import PostResponse, ValidateResponse
from api.result import AppError, ErrorKind, Result, fail, ok

log = get_client_logger()

STATUS_KINDS = {
    404: ErrorKind.NOT_FOUND,
    400: ErrorKind.VALIDATION,
    422: ErrorKind.VALIDATION,
}


def error_from_response(response: httpx.Response) -> AppError:
    """Build an AppError from a non-2xx response."""
    kind = STATUS_KINDS.get(response.status_code, ErrorKind.INTERNAL)
    try:
        body = response.json()
    except ValueError:
        body = None
    message = body.get("error") if isinstance(body, dict) else None
    return AppError(kind, message if isinstance(message, str) else "")


class PlaygroundClient:
    """Client for the /posts and /validate endpoints."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Server URL (default: from settings)
            timeout: Request timeout in seconds (default: from settings)
            transport: Optional httpx transport, e.g. for in-process testing
        """
        self._base_url = settings.client_base_url if base_url is None else base_url
        self._timeout = settings.client_timeout if timeout is None else timeout
        self._http = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=transport,
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _get[M: BaseModel](
        self, path: str, params: dict, model: type[M]
    ) -> Result[M, AppError]:
        response = await self._http.get(path, params=params)
        log.debug("response_received", path=path, status=response.status_code)

        if response.is_success:
            return ok(model.model_validate(response.json()))

        error = error_from_response(response)
        log.info("request_failed", path=path, status=response.status_code, error=error.message)
        return fail(error)

    async def get_post(self, id: str) -> Result[PostResponse, AppError]:
        """Fetch a post by ID."""
        return await self._get("/posts", {"id": id}, PostResponse)

    async def validate(self, age: int, email: str) -> Result[ValidateResponse, AppError]:
        """Submit an age/email pair for validation."""
        return await self._get("/validate", {"age": age, "email": email}, ValidateResponse)
