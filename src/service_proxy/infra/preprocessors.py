from typing import Mapping, Optional

import httpx

from service_proxy.domain.interfaces.i_preprocessor import IRequestPreprocessor


class HeaderPreprocessor:
    """Add default headers without overriding ones set per call."""

    def __init__(self, headers: Mapping[str, str]):
        self.headers = dict(headers)

    def __call__(self, request: httpx.Request) -> None:
        for key, val in self.headers.items():
            request.headers.setdefault(key, val)


class BearerTokenPreprocessor:
    def __init__(self, token: str, scheme: str = "Bearer"):
        self.token = token
        self.scheme = scheme

    def __call__(self, request: httpx.Request) -> None:
        request.headers["Authorization"] = f"{self.scheme} {self.token}"


def chain_preprocessors(
    *hooks: Optional[IRequestPreprocessor],
) -> IRequestPreprocessor:
    """Run hooks in order; None entries are skipped."""
    active = [h for h in hooks if h is not None]

    def _run(request: httpx.Request) -> None:
        for hook in active:
            hook(request)

    return _run
