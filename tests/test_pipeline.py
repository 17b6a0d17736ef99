"""
Tests for running the commands without an editor
"""
import json

import pytest

from config import save_settings
from conftest import jisho_handler, make_client, ollama_handler
from errors import InvalidResult
from models import PluginSettings
from pipeline import HelperPipeline


@pytest.mark.asyncio
async def test_translate_uses_saved_model(config):
    calls = []
    save_settings(config, "translate-to-japanese", PluginSettings(model="qwen2.5"))
    pipeline = HelperPipeline(config, client=make_client(ollama_handler("こんにちは", calls)))

    assert await pipeline.translate("  hello ", "en-ja") == "こんにちは"
    body = json.loads(calls[0].content)
    assert body["model"] == "qwen2.5"
    assert body["messages"][1]["content"] == "hello"


@pytest.mark.asyncio
async def test_translate_rejects_unknown_direction(config):
    pipeline = HelperPipeline(config, client=make_client(ollama_handler("x")))
    with pytest.raises(ValueError):
        await pipeline.translate("text", "ja-de")


@pytest.mark.asyncio
async def test_lookup(config, neko_entry):
    pipeline = HelperPipeline(config, client=make_client(jisho_handler([neko_entry])))
    markdown = await pipeline.lookup("猫")
    assert "1. cat" in markdown
    assert "2. shamisen" in markdown


@pytest.mark.asyncio
async def test_lookup_not_found(config):
    pipeline = HelperPipeline(config, client=make_client(jisho_handler([])))
    with pytest.raises(InvalidResult):
        await pipeline.lookup("ほげ")


@pytest.mark.asyncio
async def test_close_leaves_shared_client_open(config):
    client = make_client(ollama_handler("x"))
    pipeline = HelperPipeline(config, client=client)
    await pipeline.close()
    assert not client.is_closed
    await client.aclose()
