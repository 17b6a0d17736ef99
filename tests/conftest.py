"""
Shared fixtures for the helper tests
"""
import json

import httpx
import pytest

from config import Config


NEKO_ENTRY = {
    "slug": "猫",
    "is_common": True,
    "japanese": [{"word": "猫", "reading": "ねこ"}],
    "senses": [
        {
            "english_definitions": ["cat"],
            "parts_of_speech": ["Noun"],
            "tags": [],
            "info": [],
            "sentences": [],
        },
        {
            "english_definitions": ["shamisen"],
            "parts_of_speech": ["Noun"],
            "tags": ["Colloquial"],
            "info": [],
            "sentences": [],
        },
    ],
    "jlpt": ["jlpt-n5"],
}


@pytest.fixture
def config(tmp_path):
    """Config isolated from the environment, with settings in a temp dir"""
    return Config(settings_dir=str(tmp_path / "settings"))


@pytest.fixture
def neko_entry():
    return json.loads(json.dumps(NEKO_ENTRY))


def make_client(handler):
    """AsyncClient whose requests are answered by `handler`"""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def jisho_handler(entries, calls=None):
    def handler(request):
        if calls is not None:
            calls.append(request)
        return httpx.Response(200, json={"meta": {"status": 200}, "data": entries})
    return handler


def ollama_handler(content, calls=None):
    def handler(request):
        if calls is not None:
            calls.append(request)
        return httpx.Response(200, json={"message": {"role": "assistant", "content": content}})
    return handler
