import httpx
import pytest

from ipa_client.exceptions import RoundTripError
from ipa_client.infrastructure.adapters.http.header_transport import DEFAULT_USER_AGENT, AddHeaderTransport
from tests.unit._fakes_http import Recorder


def test_sets_default_user_agent_when_missing():
    recorder = Recorder(lambda req: httpx.Response(204))
    transport = AddHeaderTransport(httpx.MockTransport(recorder))
    res = transport.handle_request(httpx.Request("GET", "https://example.com"))
    assert res.status_code == 204
    assert recorder.requests[0].headers["User-Agent"] == DEFAULT_USER_AGENT


def test_keeps_caller_user_agent():
    recorder = Recorder(lambda req: httpx.Response(204))
    transport = AddHeaderTransport(httpx.MockTransport(recorder))
    transport.handle_request(httpx.Request("GET", "https://example.com", headers={"User-Agent": "mine"}))
    assert recorder.requests[0].headers["User-Agent"] == "mine"


def test_custom_default_user_agent():
    recorder = Recorder(lambda req: httpx.Response(204))
    transport = AddHeaderTransport(httpx.MockTransport(recorder), user_agent="agent/2")
    transport.handle_request(httpx.Request("GET", "https://example.com"))
    assert recorder.requests[0].headers["User-Agent"] == "agent/2"


def test_wraps_transport_errors():
    def respond(req):
        raise httpx.ConnectTimeout("timed out", request=req)

    transport = AddHeaderTransport(httpx.MockTransport(respond))
    with pytest.raises(RoundTripError, match="failed to make round trip: timed out") as exc_info:
        transport.handle_request(httpx.Request("GET", "https://example.com"))
    assert isinstance(exc_info.value.__cause__, httpx.ConnectTimeout)
