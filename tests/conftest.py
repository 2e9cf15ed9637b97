"""Shared fakes for the prediction client tests."""

import json

import pytest


class FakeResponse:
    def __init__(self, status_code=200, body=b""):
        self.status_code = status_code
        if isinstance(body, (dict, list)):
            body = json.dumps(body)
        if isinstance(body, str):
            body = body.encode("utf-8")
        self.content = body


class FakeSession:
    """Records every post and answers with a canned response or exception."""

    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def post(self, url, json=None, headers=None):
        self.calls.append({"url": url, "json": json, "headers": headers})
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture
def make_session():
    def _make(status_code=200, body=b"", exc=None):
        return FakeSession(FakeResponse(status_code, body), exc=exc)
    return _make
