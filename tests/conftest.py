"""Shared fixtures: an in-memory HTTP client so no test touches the network."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

import pytest

from walkera_pdfs.core.http_client import HttpClientInterface, HttpResponse


class FakeBody:
    """Response body handing out one chunk per read1 call, like a socket does."""

    def __init__(
        self,
        data: bytes,
        error: Optional[Exception] = None,
        chunks: Optional[List[bytes]] = None,
        on_chunk: Optional[Callable[[], None]] = None,
    ) -> None:
        self.data = data
        self.error = error
        self.chunks = list(chunks) if chunks is not None else ([data] if data else [])
        self.on_chunk = on_chunk
        self.released = False

    def read1(self, amt: int = -1) -> bytes:
        if self.error is not None:
            raise self.error
        if not self.chunks:
            return b""
        if self.on_chunk is not None:
            self.on_chunk()
        return self.chunks.pop(0)

    def release_conn(self) -> None:
        self.released = True


class FakeHttpClient(HttpClientInterface):
    """Serves canned responses keyed by URL and records every request."""

    def __init__(self) -> None:
        self.routes: Dict[str, object] = {}
        self.requests: List[str] = []

    def add(
        self,
        url: str,
        data: bytes = b"",
        status: int = 200,
        content_type: str = "application/pdf",
        read_error: Optional[Exception] = None,
        chunks: Optional[List[bytes]] = None,
        on_chunk: Optional[Callable[[], None]] = None,
    ) -> FakeBody:
        body = FakeBody(data, read_error, chunks, on_chunk)
        self.routes[url] = HttpResponse(
            status=status, headers={"Content-Type": content_type}, body=body
        )
        return body

    def fail(self, url: str, error: Exception) -> None:
        self.routes[url] = error

    def _lookup(self, url: str) -> HttpResponse:
        self.requests.append(url)
        route = self.routes.get(url)
        if isinstance(route, Exception):
            raise route
        if route is None:
            return HttpResponse(status=404, headers={"Content-Type": "text/html"}, body=b"")
        return route

    def get(self, url: str) -> bytes:
        return self._lookup(url).read()

    def request(self, url: str, timeout: Optional[float] = None) -> HttpResponse:
        return self._lookup(url)


@pytest.fixture()
def http_client() -> FakeHttpClient:
    return FakeHttpClient()
