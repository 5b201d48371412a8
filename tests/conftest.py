import json

import httpx
import pytest
from fastapi.testclient import TestClient

from fillout_filter import Settings, create_app

SUBMISSIONS = [
    {
        "submissionId": "s1",
        "submissionTime": "2024-05-16T23:20:05.324Z",
        "questions": [
            {"id": "name", "name": "What's your name?", "type": "ShortAnswer", "value": "John"},
            {"id": "employees", "name": "How many employees?", "type": "NumberInput", "value": 2},
            {"id": "start", "name": "Start date", "type": "DatePicker", "value": "2024-02-01"},
        ],
    },
    {
        "submissionId": "s2",
        "submissionTime": "2024-05-17T10:00:00.000Z",
        "questions": [
            {"id": "name", "name": "What's your name?", "type": "ShortAnswer", "value": "Bobby"},
            {"id": "employees", "name": "How many employees?", "type": "NumberInput", "value": 7},
            {"id": "start", "name": "Start date", "type": "DatePicker", "value": None},
        ],
    },
    {
        "submissionId": "s3",
        "submissionTime": "2024-05-18T09:00:00.000Z",
        "questions": [
            {"id": "name", "name": "What's your name?", "type": "ShortAnswer", "value": "Jolene"},
        ],
    },
]


class FakeFillout:
    """Records upstream requests and answers them with a canned reply."""

    def __init__(self, status_code=200, payload=None, error=None):
        self.status_code = status_code
        self.payload = {"responses": SUBMISSIONS, "totalResponses": 3, "pageCount": 1} if payload is None else payload
        self.error = error
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, content=json.dumps(self.payload))


@pytest.fixture
def settings():
    return Settings(api_key="test-key", fillout_base_url="https://fillout.test")


@pytest.fixture
def fake_fillout():
    return FakeFillout()


@pytest.fixture
def make_client(settings):
    def _make(fake):
        http = httpx.Client(
            base_url=settings.fillout_base_url,
            headers={"Authorization": f"Bearer {settings.api_key}"},
            transport=httpx.MockTransport(fake),
        )
        return TestClient(create_app(settings, client=http))

    return _make


@pytest.fixture
def client(make_client, fake_fillout):
    return make_client(fake_fillout)
