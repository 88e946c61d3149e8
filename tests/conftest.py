"""Shared fixtures: a transport whose HTTP exchanges hit an in-memory handler."""

import json

import httpx
import pytest

from awx_client import rest

BASE_URL = "http://awx.test"


class Recorder:
    """httpx.MockTransport handler that records requests and replays responses.

    Responses are served in the order they were queued; once the queue is
    empty every request gets ``200 {}``.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response] = []

    def queue(self, status_code: int = 200, json_body=None, content: bytes | None = None):
        if json_body is not None:
            content = json.dumps(json_body).encode()
        self._responses.append(httpx.Response(status_code, content=content or b""))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._responses:
            return self._responses.pop(0)
        return httpx.Response(200, content=b"{}")

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def transport(recorder: Recorder) -> rest.Transport:
    """Transport with token auth whose exchanges go to the recorder."""
    http_client = httpx.Client(transport=httpx.MockTransport(recorder))
    return rest.Transport(
        BASE_URL,
        auth=rest.TokenAuth("secret-token"),
        http_client=http_client,
    )
