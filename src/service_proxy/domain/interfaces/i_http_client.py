from abc import ABC, abstractmethod

import httpx


class IHttpClient(ABC):
    @abstractmethod
    def send(self, request: httpx.Request) -> bytes:
        """Send request, return the full body of a 2xx response"""
        pass

    @abstractmethod
    def close(self) -> None:
        pass
