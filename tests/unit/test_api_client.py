# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import json
import logging
from urllib.parse import urlencode

import httpx
import pytest

from apidriver import APIClient, ClientConfig, ClientDefinition, UnexpectedResponseError
from apidriver.errors import ErrorCategory
from apidriver.http.client import TransportError
from apidriver.http.models import HttpResponse

HOST = "http://example.test"


class RecordingTransport:
    def __init__(self, body: str = "", error: Exception | None = None):
        self._body = body
        self._error = error
        self.calls: list[dict] = []

    def send(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if self._error is not None:
            raise self._error
        return HttpResponse(body=self._body, status_code=200, url=url)


class EchoTransport:
    def send(self, method, url, body=None, headers=None):  # noqa: ARG002
        return HttpResponse(body=body or "", status_code=200, url=url)


class JsonClient(APIClient):
    definition = (
        ClientDefinition()
        .encode_with(lambda data: json.dumps(data, separators=(",", ":")))
        .decode_with(json.loads)
        .header("Content-Type", "application/json")
        .header("Accept", "application/json")
    )


def test_post_raw_text_without_codecs():
    transport = RecordingTransport(body="ok")
    client = APIClient(ClientConfig(HOST), transport)

    result = client.post("/items", "raw-text")

    assert result == "ok"
    call = transport.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == f"{HOST}/items"
    assert call["body"] == "raw-text"


def test_post_with_json_codecs():
    transport = RecordingTransport(body='{"id":1}')
    client = JsonClient(ClientConfig(HOST), transport)

    result = client.post("/items", {"name": "x"})

    assert result == {"id": 1}
    assert transport.calls[0]["body"] == '{"name":"x"}'


def test_transport_failure_becomes_unexpected_response():
    error = TransportError("Internal Server Error", http_body="oops", status_code=500, category=ErrorCategory.HTTP_STATUS)
    client = APIClient(HOST, RecordingTransport(error=error))

    with pytest.raises(UnexpectedResponseError) as excinfo:
        client.get("/items")

    exc = excinfo.value
    assert "Internal Server Error" in str(exc)
    assert "oops" in str(exc)
    assert exc.status_code == 500
    assert exc.http_body == "oops"
    assert exc.category is ErrorCategory.HTTP_STATUS
    assert exc.method == "GET"
    assert exc.url == f"{HOST}/items"
    assert exc.__cause__ is error


def test_raw_httpx_errors_are_translated():
    request = httpx.Request("GET", f"{HOST}/slow")
    error = httpx.ReadTimeout("timed out", request=request)
    client = APIClient(HOST, RecordingTransport(error=error))

    with pytest.raises(UnexpectedResponseError) as excinfo:
        client.get("/slow")

    assert "timed out" in str(excinfo.value)
    assert excinfo.value.category is ErrorCategory.TIMEOUT
    assert excinfo.value.__cause__ is error


def test_failure_is_not_retried():
    transport = RecordingTransport(error=TransportError("Service Unavailable", status_code=503))
    client = APIClient(HOST, transport)

    with pytest.raises(UnexpectedResponseError):
        client.post("/items", "payload")

    assert len(transport.calls) == 1


def test_failure_is_logged(caplog):
    client = APIClient(HOST, RecordingTransport(error=TransportError("Bad Gateway", status_code=502)))

    with caplog.at_level(logging.WARNING, logger="apidriver.api_client"):
        with pytest.raises(UnexpectedResponseError):
            client.get("/items")

    assert "Bad Gateway" in caplog.text


def test_call_headers_override_definition_headers():
    transport = RecordingTransport(body="{}")
    client = JsonClient(HOST, transport)

    client.get("/items", headers={"Accept": "text/plain", "X-Trace": "1"})

    headers = transport.calls[0]["headers"]
    assert headers["Accept"] == "text/plain"
    assert headers["Content-Type"] == "application/json"
    assert headers["X-Trace"] == "1"


def test_call_headers_do_not_leak_into_definition():
    client = JsonClient(HOST, RecordingTransport(body="{}"))
    client.get("/items", headers={"Accept": "text/plain"})
    assert JsonClient.definition.headers["Accept"] == "application/json"


def test_delete_without_data_sends_no_body_or_querystring():
    transport = RecordingTransport()
    client = APIClient(HOST, transport)

    client.delete("/items/5")

    call = transport.calls[0]
    assert call["method"] == "DELETE"
    assert call["url"] == f"{HOST}/items/5"
    assert "body" not in call


def test_post_without_data_never_calls_encoder():
    calls = []
    definition = ClientDefinition().encode_with(lambda data: calls.append(data) or "encoded")
    transport = RecordingTransport()
    client = APIClient(HOST, transport, definition=definition)

    client.post("/items")

    assert calls == []
    assert "body" not in transport.calls[0]


@pytest.mark.parametrize("falsy", ["", 0, [], False])
def test_falsy_data_is_still_encoded(falsy):
    calls = []
    definition = ClientDefinition().encode_with(lambda data: calls.append(data) or "encoded")
    transport = RecordingTransport()
    client = APIClient(HOST, transport, definition=definition)

    client.put("/items/1", falsy)

    assert calls == [falsy]
    assert transport.calls[0]["body"] == "encoded"


def test_get_with_none_and_empty_data_resolve_identically():
    transport = RecordingTransport()
    client = APIClient(HOST, transport)

    client.get("/search", None)
    client.get("/search", {})

    assert transport.calls[0]["url"] == transport.calls[1]["url"] == f"{HOST}/search"


def test_get_with_data_appends_querystring():
    transport = RecordingTransport()
    client = APIClient(HOST, transport)
    data = {"q": "red shoes", "page": 2}

    client.get("/search", data)

    call = transport.calls[0]
    assert call["url"] == f"{HOST}/search?{urlencode(data)}"
    assert "body" not in call


def test_delete_with_data_appends_querystring():
    transport = RecordingTransport()
    client = APIClient(HOST, transport)

    client.delete("/items", {"id": 5})

    assert transport.calls[0]["url"] == f"{HOST}/items?id=5"


def test_absolute_path_overrides_host():
    transport = RecordingTransport()
    client = APIClient(HOST, transport)

    client.get("https://other.test/status")

    assert transport.calls[0]["url"] == "https://other.test/status"


def test_decoder_applied_to_empty_body():
    definition = ClientDefinition().decode_with(lambda body: ("decoded", body))
    client = APIClient(HOST, RecordingTransport(body=""), definition=definition)

    assert client.get("/empty") == ("decoded", "")


def test_codec_errors_propagate_unchanged():
    client = JsonClient(HOST, RecordingTransport(body="not json"))
    with pytest.raises(json.JSONDecodeError):
        client.get("/items")

    def broken(_data):
        raise ValueError("cannot encode")

    client = APIClient(HOST, RecordingTransport(), definition=ClientDefinition().encode_with(broken))
    with pytest.raises(ValueError, match="cannot encode"):
        client.post("/items", {"a": 1})


@pytest.mark.parametrize("data", [{"name": "x"}, [1, 2, 3], {"nested": {"ok": True}}, "text", 0])
def test_json_codecs_round_trip_through_echo(data):
    client = JsonClient(HOST, EchoTransport())
    assert client.post("/echo", data) == data


def test_generic_request_uppercases_method():
    transport = RecordingTransport()
    client = APIClient(HOST, transport)

    client.request("patch", "/items/1", "x", {"X-Mode": "partial"})

    call = transport.calls[0]
    assert call["method"] == "PATCH"
    assert call["body"] == "x"
    assert call["headers"] == {"X-Mode": "partial"}


def test_extra_verbs():
    transport = RecordingTransport()
    client = APIClient(HOST, transport)

    client.patch("/items/1", "x")
    client.head("/items", {"a": 1})
    client.options("/items")

    assert [c["method"] for c in transport.calls] == ["PATCH", "HEAD", "OPTIONS"]
    assert transport.calls[0]["body"] == "x"
    assert transport.calls[1]["url"] == f"{HOST}/items?a=1"
    assert "body" not in transport.calls[1]


def test_instances_share_class_definition():
    first = JsonClient(HOST, RecordingTransport())
    second = JsonClient("http://other.test", RecordingTransport())
    assert first.definition is second.definition is JsonClient.definition


def test_subclasses_get_independent_definitions():
    class Base(APIClient):
        definition = ClientDefinition().header("Accept", "application/json")

    class Child(Base):
        pass

    Child.definition.header("X-Child", "1")

    assert "X-Child" not in Base.definition.headers
    assert Child.definition.headers["Accept"] == "application/json"


def test_plain_subclass_does_not_mutate_base_definition():
    class Plain(APIClient):
        pass

    Plain.definition.header("X-Plain", "1")
    assert "X-Plain" not in APIClient.definition.headers


def test_close_delegates_to_transport():
    class ClosingTransport(RecordingTransport):
        closed = False

        def close(self):
            self.closed = True

    transport = ClosingTransport()
    with APIClient(HOST, transport):
        pass
    assert transport.closed is True
