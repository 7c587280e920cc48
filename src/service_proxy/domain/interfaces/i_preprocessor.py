from typing import Protocol

import httpx


class IRequestPreprocessor(Protocol):
    def __call__(self, request: httpx.Request) -> None:
        """Mutate the outbound request in place (headers, url, ...)"""
        ...
