# todos/todo_client.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar

import httpx

from .todo_models import RemoteTodo

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com"
DEFAULT_TIMEOUT_SECONDS = 12.0


@dataclass(slots=True, frozen=True)
class FetchOk:
    ok: ClassVar[bool] = True

    data: list[RemoteTodo] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class FetchFailed:
    ok: ClassVar[bool] = False

    message: str
    status: int | None = None


NetworkResult = FetchOk | FetchFailed


def _error_message(exc: Exception) -> str:
    return str(exc).strip() or "Network error"


def _parse_todos(payload: Any) -> list[RemoteTodo] | None:
    if not isinstance(payload, list):
        return None
    out: list[RemoteTodo] = []
    for entry in payload:
        if not isinstance(entry, dict):
            logger.debug("Skipping non-object todo entry: %r", entry)
            continue
        out.append(RemoteTodo.from_api(entry))
    return out


class TodoApiClient:
    """
    Read-only client for the remote todo listing.

    get_todos() never raises for transport, status or parse problems; they come
    back as FetchFailed. There are no retries: a caller that wants to retry
    simply calls again.

    An httpx.AsyncClient can be injected (tests pass one built on
    httpx.MockTransport). Otherwise a short-lived client is opened per call.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = httpx.Timeout(timeout_seconds)
        self._http_client = http_client

    @property
    def todos_url(self) -> str:
        return f"{self._base_url}/todos"

    async def get_todos(self) -> NetworkResult:
        url = self.todos_url
        logger.info("Fetching remote todos url=%s", url)

        try:
            if self._http_client is not None:
                response = await self._http_client.get(url, timeout=self._timeout)
            else:
                transport = httpx.AsyncHTTPTransport(retries=0)
                async with httpx.AsyncClient(transport=transport, timeout=self._timeout) as client:
                    response = await client.get(url)
        except httpx.HTTPError as e:
            logger.warning("Remote todos fetch failed: %s", e.__class__.__name__)
            return FetchFailed(message=_error_message(e))

        if not response.is_success:
            logger.warning("Remote todos fetch failed: HTTP %s", response.status_code)
            return FetchFailed(
                message=f"HTTP {response.status_code}", status=response.status_code
            )

        try:
            payload = response.json()
        except ValueError:
            logger.warning("Remote todos response is not valid JSON")
            return FetchFailed(message="Malformed response", status=response.status_code)

        todos = _parse_todos(payload)
        if todos is None:
            logger.warning("Remote todos response is not a list (%s)", type(payload).__name__)
            return FetchFailed(message="Malformed response", status=response.status_code)

        logger.info("Fetched remote todos count=%s", len(todos))
        return FetchOk(data=todos)


async def fetch_remote_todos(client: TodoApiClient | None = None) -> NetworkResult:
    """Convenience wrapper using the default endpoint when no client is given."""
    return await (client or TodoApiClient()).get_todos()
