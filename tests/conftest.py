import json
import logging
import logging.config
from pathlib import Path

import pytest

from notionkit import env
from notionkit.transport import RequestsTransport

LOGGING_CONFIG = {
    "version": 1,
    "formatters": {
        "brief": {"format": "%(message)s"},
        "default": {
            "format": "%(asctime)s %(levelname)-8s %(name)-15s %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        "notionkit": {"level": logging.DEBUG, "handlers": ["console"]},
        "": {"level": logging.INFO, "handlers": ["console"]},
    },
}
logging.config.dictConfig(LOGGING_CONFIG)

DATA_DIR = Path(__file__).parent / "data"
API_URL = "https://api.notion.com/v1/"
TEST_TOKEN = "secret_test_token"


class FakeTransport:
    """Replays canned `(status, body)` responses and records requests."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    def send(self, method, path, body=None):
        self.requests.append((method, path, body))
        status, payload = self.responses.pop(0)
        if isinstance(payload, bytes):
            return status, payload
        return status, json.dumps(payload).encode("utf-8")


@pytest.fixture
def load_json():
    def load(name: str):
        with open(DATA_DIR / name, encoding="utf8") as fd:
            return json.load(fd)

    return load


@pytest.fixture
def fake_transport():
    return FakeTransport


@pytest.fixture
def transport():
    with RequestsTransport(TEST_TOKEN, url=API_URL) as _transport:
        yield _transport


@pytest.fixture
def clean_env(monkeypatch):
    """Clear cached configuration around a test."""
    for name in ("NOTION_TOKEN", "NOTION_VERSION", "NOTION_API_URL"):
        monkeypatch.delenv(name, raising=False)

    getters = (env.get_notion_token, env.get_notion_version, env.get_notion_api_url)
    for getter in getters:
        getter.cache_clear()
    yield monkeypatch
    for getter in getters:
        getter.cache_clear()
