import json

import pytest
import requests

from adobecli.config import ConfigStore, MemoryBackend


def make_response(status_code=200, body=None, text=None):
    """Build a ``requests.Response`` without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    if text is not None:
        response._content = text.encode("utf-8")
    elif body is not None:
        response._content = json.dumps(body).encode("utf-8")
    else:
        response._content = b""
    response.encoding = "utf-8"
    return response


@pytest.fixture
def configured_store():
    return ConfigStore(
        MemoryBackend({"username": "admin", "password": "secret"})
    )


@pytest.fixture
def empty_store():
    return ConfigStore(MemoryBackend())
