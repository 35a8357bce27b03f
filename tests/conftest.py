import io
import json
import urllib.error

import pytest

from perplexity_core.client import CompletionClient
from perplexity_core.config import Settings

BASE_URL = "https://api.example.test/chat/completions"


class FakeResponse:
    def __init__(self, body: bytes):
        self._body = body

    def read(self):
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class BrokenBody:
    """File-like object whose read() fails, for unreadable error bodies."""

    def read(self, *args):
        raise OSError("connection reset")

    def close(self):
        pass


class FakeOpener:
    """Stands in for urllib.request.urlopen and records each request."""

    def __init__(self, body=None, error=None):
        self.body = body
        self.error = error
        self.requests = []
        self.timeouts = []

    def __call__(self, request, timeout=None):
        self.requests.append(request)
        self.timeouts.append(timeout)
        if self.error is not None:
            raise self.error
        body = self.body
        if isinstance(body, (dict, list)):
            body = json.dumps(body)
        if isinstance(body, str):
            body = body.encode("utf-8")
        return FakeResponse(body)

    @property
    def last_body(self):
        return json.loads(self.requests[-1].data.decode("utf-8"))


def http_error(status, reason, body=b"", fp=None):
    return urllib.error.HTTPError(
        BASE_URL, status, reason, {}, fp if fp is not None else io.BytesIO(body)
    )


def completion_payload(content="The answer.", **extra):
    payload = {"choices": [{"message": {"role": "assistant", "content": content}}]}
    payload.update(extra)
    return payload


@pytest.fixture
def settings():
    return Settings(api_key="test-key", base_url=BASE_URL)


@pytest.fixture
def opener():
    return FakeOpener(body=completion_payload())


@pytest.fixture
def client(settings, opener):
    return CompletionClient(settings, opener=opener)
