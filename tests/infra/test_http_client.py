import httpx
import pytest

from service_proxy.domain.exception import (
    ReadFailureError,
    TransportFailureError,
    UnexpectedStatusError,
)
from service_proxy.infra.http_client import HttpClient

URL = "https://api.test/users"


class TrackingStream(httpx.SyncByteStream):
    def __init__(self, chunks=(b"",), fail: bool = False):
        self.chunks = chunks
        self.fail = fail
        self.closed = False

    def __iter__(self):
        for chunk in self.chunks:
            yield chunk
        if self.fail:
            raise httpx.ReadError("connection reset while reading")

    def close(self):
        self.closed = True


def client_for(handler) -> HttpClient:
    return HttpClient(timeout=1, transport=httpx.MockTransport(handler))


class TestHttpClientSend:

    def test_2xx_returns_body_unaltered(self):
        for status in (200, 201, 204, 299):
            client = client_for(lambda request, s=status: httpx.Response(s, content=b"\x00body"))

            assert client.send(httpx.Request("GET", URL)) == b"\x00body"

    def test_non_2xx_raises_unexpected_status_without_body(self):
        client = client_for(lambda request: httpx.Response(404, content=b"secret detail"))

        with pytest.raises(UnexpectedStatusError) as exc:
            client.send(httpx.Request("GET", URL))

        assert exc.value.status_code == 404
        assert exc.value.url == URL
        assert "secret detail" not in str(exc.value)

    @pytest.mark.parametrize("status", [100, 302, 400, 500, 503])
    def test_status_outside_2xx_is_rejected(self, status):
        client = client_for(lambda request: httpx.Response(status))

        with pytest.raises(UnexpectedStatusError) as exc:
            client.send(httpx.Request("GET", URL))

        assert exc.value.status_code == status

    def test_transport_failure_wraps_cause_and_url(self):
        def handler(request):
            raise httpx.ConnectError("connection refused")

        client = client_for(handler)

        with pytest.raises(TransportFailureError) as exc:
            client.send(httpx.Request("GET", URL))

        assert exc.value.url == URL
        assert URL in str(exc.value)
        assert isinstance(exc.value.__cause__, httpx.ConnectError)

    def test_timeout_is_a_transport_failure(self):
        def handler(request):
            raise httpx.ConnectTimeout("timed out")

        with pytest.raises(TransportFailureError):
            client_for(handler).send(httpx.Request("GET", URL))

    def test_read_failure_after_success_status(self):
        stream = TrackingStream(chunks=(b"partial",), fail=True)
        client = client_for(lambda request: httpx.Response(200, stream=stream))

        with pytest.raises(ReadFailureError) as exc:
            client.send(httpx.Request("GET", URL))

        assert exc.value.url == URL
        assert stream.closed is True

    def test_response_is_closed_on_success(self):
        stream = TrackingStream(chunks=(b"ok",))
        client = client_for(lambda request: httpx.Response(200, stream=stream))

        assert client.send(httpx.Request("GET", URL)) == b"ok"
        assert stream.closed is True

    def test_response_is_closed_on_status_error(self):
        stream = TrackingStream(chunks=(b"nope",))
        client = client_for(lambda request: httpx.Response(500, stream=stream))

        with pytest.raises(UnexpectedStatusError):
            client.send(httpx.Request("GET", URL))

        assert stream.closed is True

    def test_request_is_sent_as_given(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200)

        request = httpx.Request("PUT", URL, headers={"X-Trace": "1"}, content=b"data")
        client_for(handler).send(request)

        assert seen[0].method == "PUT"
        assert seen[0].headers["X-Trace"] == "1"
        assert seen[0].content == b"data"


class TestHttpClientLifecycle:

    def test_context_manager_closes_session(self):
        with client_for(lambda request: httpx.Response(200)) as client:
            pass

        assert client.session.is_closed
