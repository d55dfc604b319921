import pytest

from pubsub_push.client import PubSubClientCommon
from pubsub_push.deps import Settings


def make_settings(**overrides) -> Settings:
    values = {
        "SUBSCRIBE_KEY": "sub-c-test",
        "AUTH_KEY": None,
        "UUID": "test-uuid",
        "ORIGIN": "ps.example.com",
        "NON_SUBSCRIBE_REQUEST_TIMEOUT": 7,
        "CONNECT_TIMEOUT": 3,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class FakeResponse:
    def __init__(self, status_code: int, text: str):
        self.status_code = status_code
        self.text = text


class FakeSession:
    """Zastępuje requests.Session, zapamiętuje wywołania."""

    def __init__(self, status_code: int = 200, text: str = "[1, \"Modified Channels\"]"):
        self.status_code = status_code
        self.text = text
        self.calls = []
        self.closed = False

    def request(self, method, url, params=None, timeout=None):
        self.calls.append({"method": method, "url": url, "params": params, "timeout": timeout})
        return FakeResponse(self.status_code, self.text)

    def close(self):
        self.closed = True


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def client(settings):
    return PubSubClientCommon(settings)


@pytest.fixture
def endpoint(client):
    return client.add_channels_to_push()
