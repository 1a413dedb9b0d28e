import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

import urllib3
from urllib3.exceptions import TimeoutError as Urllib3TimeoutError

CHUNK_SIZE = 64 * 1024


class DeadlineExceededError(Urllib3TimeoutError):
    """The body was still arriving when the overall download deadline passed"""


@dataclass
class HttpResponse:
    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Any = None

    def header(self, name: str, default: str = '') -> str:
        for key, value in self.headers.items():
            if key.lower() == name.lower():
                return value
        return default

    def read(self, deadline: Optional[float] = None) -> bytes:
        """Read the whole body into memory.

        deadline is a time.monotonic() value; a body still arriving after it
        raises DeadlineExceededError.
        """
        if self.body is None:
            return b''
        if isinstance(self.body, (bytes, bytearray)):
            return bytes(self.body)

        read1 = getattr(self.body, 'read1', None)
        if read1 is None:
            return self.body.read()

        # read1 returns whatever has arrived, so a slow sender cannot hold a single read open
        chunks = []
        received = 0
        while True:
            chunk = read1(CHUNK_SIZE)
            if not chunk:
                break
            chunks.append(chunk)
            received += len(chunk)
            if deadline is not None and time.monotonic() > deadline:
                raise DeadlineExceededError(f'body incomplete after {received} bytes')
        return b''.join(chunks)

    def close(self) -> None:
        release = getattr(self.body, 'release_conn', None)
        if release is not None:
            release()


class HttpClientInterface(ABC):
    @abstractmethod
    def get(self, url: str) -> bytes:
        pass

    @abstractmethod
    def request(self, url: str, timeout: Optional[float] = None) -> HttpResponse:
        pass


class Urllib3HttpClient(HttpClientInterface):
    def __init__(self, user_agent: Optional[str] = None):
        headers = {'User-Agent': user_agent} if user_agent else None
        self.http = urllib3.PoolManager(headers=headers)
        # redirects are followed, failed requests are never retried
        self.retries = urllib3.Retry(total=10, connect=0, read=0, status=0, other=0, redirect=10)

    def get(self, url: str) -> bytes:
        response = self.http.request('GET', url, retries=self.retries)
        return response.data

    def request(self, url: str, timeout: Optional[float] = None) -> HttpResponse:
        kwargs = {'retries': self.retries, 'preload_content': False}
        if timeout:
            kwargs['timeout'] = urllib3.Timeout(total=timeout)

        response = self.http.request('GET', url, **kwargs)
        return HttpResponse(status=response.status, headers=response.headers, body=response)
