import asyncio

import httpx
import pytest
import requests

from pubsub_push.client import PubSubClient, PubSubClientAsync
from pubsub_push.enums import PushType
from pubsub_push.exceptions import PubSubResponseError, PubSubValidationError
from pubsub_push.push.models import PushAddChannelResult

from conftest import FakeSession, make_settings


def test_sync_request_sends_expected_query():
    session = FakeSession()
    client = PubSubClient(make_settings(AUTH_KEY="secret"), session=session)

    result = (
        client.add_channels_to_push()
        .set_channels(["a", "b"])
        .set_device_id("dev1")
        .set_push_type(PushType.GCM)
        .sync()
    )

    assert isinstance(result, PushAddChannelResult)
    assert len(session.calls) == 1
    call = session.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "https://ps.example.com/v1/push/sub-key/sub-c-test/devices/dev1"
    assert call["params"] == {"add": "a,b", "type": "gcm", "uuid": "test-uuid", "auth": "secret"}
    assert call["timeout"] == (3, 7)
    assert client.request_counter == 1


def test_auth_param_omitted_without_auth_key():
    session = FakeSession()
    client = PubSubClient(make_settings(), session=session)
    client.add_channels_to_push().set_channels("a").set_device_id("d").set_push_type("gcm").sync()
    assert "auth" not in session.calls[0]["params"]


def test_validation_error_prevents_network_call():
    session = FakeSession()
    client = PubSubClient(make_settings(), session=session)
    endpoint = client.add_channels_to_push().set_channels("a").set_device_id("").set_push_type(PushType.GCM)

    with pytest.raises(PubSubValidationError, match="Device ID"):
        endpoint.sync()
    assert session.calls == []
    assert client.request_counter == 0


def test_sync_error_status_raises_response_error():
    session = FakeSession(status_code=403, text='{"error": "Forbidden"}')
    client = PubSubClient(make_settings(), session=session)

    with pytest.raises(PubSubResponseError) as exc_info:
        client.add_channels_to_push().set_channels("a").set_device_id("d").set_push_type(PushType.APNS).sync()

    assert exc_info.value.status_code == 403
    assert "Forbidden" in exc_info.value.body
    assert client.error_counter == 1


def test_sync_non_json_body_raises_response_error():
    session = FakeSession(text="<html>oops</html>")
    client = PubSubClient(make_settings(), session=session)

    with pytest.raises(PubSubResponseError, match="invalid JSON"):
        client.add_channels_to_push().set_channels("a").set_device_id("d").set_push_type(PushType.APNS).sync()


def test_sync_transport_failure_is_wrapped():
    class BrokenSession(FakeSession):
        def request(self, method, url, params=None, timeout=None):
            raise requests.ConnectionError("boom")

    client = PubSubClient(make_settings(), session=BrokenSession())
    with pytest.raises(PubSubResponseError, match="request failed"):
        client.add_channels_to_push().set_channels("a").set_device_id("d").set_push_type(PushType.GCM).sync()
    assert client.request_counter == 1
    assert client.error_counter == 1


def test_async_request_apns2():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text="1")

    async def run():
        client = PubSubClientAsync(make_settings(), transport=httpx.MockTransport(handler))
        try:
            return await (
                client.add_channels_to_push()
                .set_channels("a,b")
                .set_device_id("dev1")
                .set_push_type(PushType.APNS2)
                .set_topic("com.example.app")
                .run_async()
            )
        finally:
            await client.close()

    result = asyncio.run(run())

    assert isinstance(result, PushAddChannelResult)
    assert len(seen) == 1
    request = seen[0]
    assert request.method == "GET"
    assert request.url.host == "ps.example.com"
    assert request.url.path == "/v2/push/sub-key/sub-c-test/devices-apns2/dev1"
    assert dict(request.url.params) == {
        "add": "a,b",
        "topic": "com.example.app",
        "environment": "development",
        "uuid": "test-uuid",
    }


def test_async_error_status_raises_response_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="Internal")

    async def run():
        client = PubSubClientAsync(make_settings(), transport=httpx.MockTransport(handler))
        try:
            await client.add_channels_to_push().set_channels("a").set_device_id("d").set_push_type("mpns").run_async()
        finally:
            await client.close()

    with pytest.raises(PubSubResponseError) as exc_info:
        asyncio.run(run())
    assert exc_info.value.status_code == 500
