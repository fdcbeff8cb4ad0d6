# tests/conftest.py
from unittest.mock import MagicMock

import pytest


def make_response(status_code=200, payload=None, json_error=None):
    """Build a stand-in for `requests.Response` with just what the fetcher reads."""
    response = MagicMock()
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def fake_session():
    """A session whose `get` is a mock; set `.get.return_value` or `.get.side_effect`."""
    session = MagicMock()
    session.get.return_value = make_response(payload={"base": "USD", "rates": {"EUR": 0.91}})
    return session


@pytest.fixture
def static_rates():
    """Rate source returning a fixed table and recording the bases it was asked for."""
    calls = []

    def source(base):
        calls.append(base)
        return {"EUR": 0.9, "JPY": 150.0}

    source.calls = calls
    return source
