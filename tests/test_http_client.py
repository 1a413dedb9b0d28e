"""Tests for the urllib3-backed HTTP client, with ``PoolManager`` patched out."""

from __future__ import annotations

import time
from unittest.mock import MagicMock, patch

import pytest
import urllib3

from walkera_pdfs.core.http_client import HttpResponse, Urllib3HttpClient


class TestHttpResponse:
    def test_header_lookup_is_case_insensitive(self) -> None:
        response = HttpResponse(status=200, headers={"content-type": "application/pdf"})
        assert response.header("Content-Type") == "application/pdf"
        assert response.header("X-Missing") == ""

    def test_read_bytes_body(self) -> None:
        assert HttpResponse(status=200, body=b"abc").read() == b"abc"
        assert HttpResponse(status=200).read() == b""

    def test_read_collects_read1_chunks(self) -> None:
        body = MagicMock()
        body.read1.side_effect = [b"%PDF-", b"1.7", b""]
        assert HttpResponse(status=200, body=body).read() == b"%PDF-1.7"

    def test_read_past_deadline_raises_timeout(self) -> None:
        body = MagicMock()
        body.read1.side_effect = [b"%PDF-", b"1.7", b""]
        with pytest.raises(urllib3.exceptions.TimeoutError):
            HttpResponse(status=200, body=body).read(deadline=time.monotonic() - 1)
        assert body.read1.call_count == 1

    def test_close_releases_connection(self) -> None:
        body = MagicMock()
        HttpResponse(status=200, body=body).close()
        body.release_conn.assert_called_once_with()


class TestUrllib3HttpClient:
    def test_get_returns_data(self) -> None:
        with patch("walkera_pdfs.core.http_client.urllib3.PoolManager") as pool_cls:
            pool_cls.return_value.request.return_value = MagicMock(data=b"<html/>")
            client = Urllib3HttpClient(user_agent="walkera-pdfs/test")

            assert client.get("https://en.walkera.com/") == b"<html/>"

        pool_cls.assert_called_once_with(headers={"User-Agent": "walkera-pdfs/test"})

    def test_request_streams_with_timeout(self) -> None:
        raw = MagicMock(status=200, headers={"Content-Type": "application/pdf"})
        with patch("walkera_pdfs.core.http_client.urllib3.PoolManager") as pool_cls:
            pool_cls.return_value.request.return_value = raw
            client = Urllib3HttpClient()

            response = client.request("https://en.walkera.com/a.pdf", timeout=900)

        args, kwargs = pool_cls.return_value.request.call_args
        assert args == ("GET", "https://en.walkera.com/a.pdf")
        assert kwargs["preload_content"] is False
        assert isinstance(kwargs["timeout"], urllib3.Timeout)
        assert kwargs["timeout"].total == 900
        assert response.status == 200
        assert response.header("content-type") == "application/pdf"
        assert response.body is raw

    def test_no_retries_on_failure(self) -> None:
        with patch("walkera_pdfs.core.http_client.urllib3.PoolManager"):
            client = Urllib3HttpClient()

        assert client.retries.connect == 0
        assert client.retries.read == 0
        assert client.retries.status == 0
