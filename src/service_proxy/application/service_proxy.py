import dataclasses
import json
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Tuple, Union

import httpx

from service_proxy.config.settings import Settings
from service_proxy.domain.entities.body import to_body
from service_proxy.domain.entities.request_options import RequestOptions
from service_proxy.domain.entities.service_api import ServiceApi
from service_proxy.domain.exception import (
    DecodeFailureError,
    InvalidAPIKeyError,
    InvalidURLError,
)
from service_proxy.domain.interfaces.i_http_client import IHttpClient
from service_proxy.domain.interfaces.i_preprocessor import IRequestPreprocessor
from service_proxy.infra.body_encoder import encode_body
from service_proxy.infra.http_client import HttpClient
from service_proxy.infra.url_builder import build_url

ApiEntry = Union[ServiceApi, Tuple[str, str]]


@dataclass
class ServiceProxyOptions:
    scheme: str
    host: str
    preprocessor: Optional[IRequestPreprocessor] = None
    apis: Optional[Mapping[str, ApiEntry]] = None


class ServiceProxy:
    """
    Facade over a fixed scheme/host and a registry of named APIs.

    Pipeline per call: registry lookup -> url -> request assembly
    -> preprocessor -> executor -> (optional) JSON decoding.
    The registry is copied at construction and read-only afterwards,
    so one proxy can be shared between threads.
    """

    def __init__(
        self,
        scheme: str,
        host: str,
        preprocessor: Optional[IRequestPreprocessor] = None,
        apis: Optional[Mapping[str, ApiEntry]] = None,
        http_client: Optional[IHttpClient] = None,
        timeout: float = Settings.Server.TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.scheme = scheme
        self.host = host
        self.preprocessor = preprocessor
        self._apis: Mapping[str, ServiceApi] = MappingProxyType(
            {key: ServiceApi.coerce(api) for key, api in (apis or {}).items()}
        )

        self._owns_http = http_client is None
        if http_client is None:
            http_client = HttpClient(timeout=timeout, transport=transport)
        self.http = http_client
        self.logger = logging.getLogger(Settings.System.LOGGER_NAME)

    @classmethod
    def from_options(
        cls,
        opts: ServiceProxyOptions,
        http_client: Optional[IHttpClient] = None,
        timeout: float = Settings.Server.TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "ServiceProxy":
        return cls(
            scheme=opts.scheme,
            host=opts.host,
            preprocessor=opts.preprocessor,
            apis=opts.apis,
            http_client=http_client,
            timeout=timeout,
            transport=transport,
        )

    @property
    def apis(self) -> Mapping[str, ServiceApi]:
        return self._apis

    def get_api(self, key: str) -> Optional[ServiceApi]:
        return self._apis.get(key)

    def build_url(self, path: str, query: Optional[Mapping[str, str]] = None) -> str:
        return build_url(self.scheme, self.host, path, query)

    def build_request(self, options: RequestOptions) -> httpx.Request:
        """
        Assemble the outbound request without sending it.
        Raises InvalidAPIKeyError, BodyEncodingError or InvalidURLError.
        """
        api = self.get_api(options.api_key)
        if api is None:
            raise InvalidAPIKeyError(options.api_key)

        url = self.build_url(api.path, options.query)

        # per-call headers replace any default set
        headers = httpx.Headers(options.headers or {})

        encoded = encode_body(to_body(options.body))
        content = None
        if encoded is not None:
            content = encoded.content
            if encoded.content_type:
                headers["Content-Type"] = encoded.content_type

        try:
            return httpx.Request(api.method, url, headers=headers, content=content)
        except httpx.InvalidURL as e:
            raise InvalidURLError(url, str(e)) from e

    def raw_request(self, request: httpx.Request) -> bytes:
        if self.preprocessor is not None:
            self.preprocessor(request)

        return self.http.send(request)

    def request(self, options: RequestOptions) -> bytes:
        request = self.build_request(options)
        self.logger.debug(f"[{options.api_key}] {request.method} {request.url}")
        return self.raw_request(request)

    def decode_json(
        self,
        options: RequestOptions,
        target: Optional[Callable[[Any], Any]] = None,
    ) -> Any:
        """
        Send the request and decode the JSON response.

        target:
        - None           -> decoded value as-is
        - dataclass type -> constructed from the decoded object's fields
        - other callable -> applied to the decoded value (a mapper)
        """
        data = self.request(options)

        try:
            payload = json.loads(data)
        except ValueError as e:
            raise DecodeFailureError(
                f"Invalid JSON response for '{options.api_key}': {e}"
            ) from e

        if target is None:
            return payload

        if dataclasses.is_dataclass(target) and isinstance(target, type):
            if not isinstance(payload, Mapping):
                raise DecodeFailureError(
                    f"Expected JSON object for {target.__name__}, "
                    f"got {type(payload).__name__}"
                )
            # unknown keys are ignored, missing required fields still fail
            known = {f.name for f in dataclasses.fields(target)}
            try:
                return target(**{k: v for k, v in payload.items() if k in known})
            except TypeError as e:
                raise DecodeFailureError(
                    f"Response does not fit {target.__name__}: {e}"
                ) from e

        try:
            return target(payload)
        except (TypeError, ValueError, KeyError) as e:
            raise DecodeFailureError(f"Failed to map response: {e}") from e

    def close(self) -> None:
        """Release the executor if this proxy created it"""
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> "ServiceProxy":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
