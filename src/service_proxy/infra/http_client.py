import logging
from typing import Optional

import httpx

from service_proxy.domain.exception import (
    ReadFailureError,
    TransportFailureError,
    UnexpectedStatusError,
)
from service_proxy.domain.interfaces.i_http_client import IHttpClient


class HttpClient(IHttpClient):
    """Blocking executor: send, check 2xx, read the whole body, release."""

    def __init__(
        self,
        timeout: float = 5,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.timeout = timeout
        self.session = httpx.Client(timeout=timeout, transport=transport)
        self.logger = logging.getLogger("service_proxy.http")

    def send(self, request: httpx.Request) -> bytes:
        url = str(request.url)
        self.logger.debug(f"{request.method} {url}")

        try:
            resp = self.session.send(request, stream=True)
        except httpx.RequestError as e:
            raise TransportFailureError(url, str(e)) from e

        try:
            self.logger.debug(f"{request.method} {url} -> {resp.status_code}")
            if resp.status_code // 100 != 2:
                raise UnexpectedStatusError(resp.status_code, url)

            try:
                return resp.read()
            except httpx.RequestError as e:
                raise ReadFailureError(url, str(e)) from e
        finally:
            resp.close()

    def close(self) -> None:
        """Close underlying session when application shut down"""
        self.session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
