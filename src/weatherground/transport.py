from __future__ import annotations

import asyncio
from http.client import HTTPException
from typing import Protocol
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from .errors import TransportError

USER_AGENT = "weatherground/0.1"


class Transport(Protocol):
    async def fetch(self, url: str) -> bytes | None:
        """Perform one GET request and return the response body."""


class UrllibTransport:
    """Transport backed by ``urllib.request`` running on a worker thread."""

    def __init__(self, *, timeout: float | None = None, user_agent: str = USER_AGENT) -> None:
        self._timeout = timeout
        self._user_agent = user_agent

    async def fetch(self, url: str) -> bytes | None:
        return await asyncio.to_thread(self._fetch_blocking, url)

    def _fetch_blocking(self, url: str) -> bytes | None:
        request = Request(url, headers={"User-Agent": self._user_agent, "Accept": "application/json"})
        kwargs = {} if self._timeout is None else {"timeout": self._timeout}
        try:
            with urlopen(request, **kwargs) as response:
                return response.read()
        except HTTPError as exc:
            raise TransportError(f"HTTP {exc.code}") from exc
        except (URLError, HTTPException, TimeoutError, OSError) as exc:
            raise TransportError("Request failed") from exc
