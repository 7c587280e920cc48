class ServiceProxyError(Exception):
    """Base service proxy exception"""


class InvalidAPIKeyError(ServiceProxyError):
    """API key is not registered on the proxy"""

    def __init__(self, api_key: str):
        self.api_key = api_key
        super().__init__(f"Invalid API key: {api_key}")


class BodyEncodingError(ServiceProxyError):
    """Request body has an unsupported shape or cannot be serialized"""


class TransportFailureError(ServiceProxyError):
    """DNS, connection or timeout failure before a response arrived"""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"Failed to request ({url}): {message}")


class UnexpectedStatusError(ServiceProxyError):
    """Response status code is outside 2xx"""

    def __init__(self, status_code: int, url: str):
        self.status_code = status_code
        self.url = url
        super().__init__(f"Invalid status code of response from {url}: {status_code}")


class ReadFailureError(ServiceProxyError):
    """Response body could not be read completely"""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"Failed to read response body from {url}: {message}")


class DecodeFailureError(ServiceProxyError):
    """Response body is not valid JSON or does not fit the target"""


class InvalidURLError(ServiceProxyError):
    """Scheme, host or path do not form a valid URL"""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"Invalid request URL ({url}): {message}")
