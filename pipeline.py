"""Run the helper commands outside an editor (CLI and HTTP API)."""
import asyncio
import logging
from typing import Dict, Optional

import httpx

from config import Config, load_settings, setup_logging
from plugins import (
    DictionaryLookupPlugin,
    HelperPlugin,
    TranslateToEnglishPlugin,
    TranslateToJapanesePlugin,
)


logger = logging.getLogger(__name__)

DIRECTIONS = {
    "ja-en": TranslateToEnglishPlugin,
    "en-ja": TranslateToJapanesePlugin,
}


class HelperPipeline:
    """Holds one HTTP client and the plugins that share it."""

    def __init__(self, config: Optional[Config] = None, client: Optional[httpx.AsyncClient] = None):
        self.config = config or Config.from_env()
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=self.config.request_timeout)
        self.plugins: Dict[str, HelperPlugin] = {}

    def _plugin(self, cls) -> HelperPlugin:
        """Return a plugin with freshly loaded settings."""
        plugin = self.plugins.get(cls.id)
        if plugin is None:
            plugin = cls(self.config, client=self.client)
            self.plugins[cls.id] = plugin
        plugin.settings = load_settings(self.config, cls.id)
        return plugin

    async def translate(self, text: str, direction: str = "ja-en") -> str:
        """
        Translate text.

        Args:
            text: Text to translate
            direction: "ja-en" or "en-ja"

        Returns:
            Translated text
        """
        if direction not in DIRECTIONS:
            raise ValueError(f"Unknown direction: {direction}. Allowed: {', '.join(DIRECTIONS)}")
        if not text.strip():
            raise ValueError("Nothing to translate")
        return await self._plugin(DIRECTIONS[direction]).process(text.strip())

    async def lookup(self, term: str) -> str:
        """Look up a term and return the Markdown entry."""
        if not term.strip():
            raise ValueError("Nothing to look up")
        return await self._plugin(DictionaryLookupPlugin).process(term.strip())

    async def close(self):
        """Clean up resources."""
        if self._owns_client:
            await self.client.aclose()


COMMANDS = {
    "translate-en": lambda p, arg: p.translate(arg, "ja-en"),
    "translate-ja": lambda p, arg: p.translate(arg, "en-ja"),
    "lookup": lambda p, arg: p.lookup(arg),
}


# CLI entry point
async def main():
    """CLI entry point for running a command directly."""
    import sys

    if len(sys.argv) < 3 or sys.argv[1] not in COMMANDS:
        print(f"Usage: python pipeline.py <{'|'.join(COMMANDS)}> <text>")
        sys.exit(1)

    command = sys.argv[1]
    text = " ".join(sys.argv[2:])

    config = Config.from_env()
    setup_logging(config.log_level)
    pipeline = HelperPipeline(config)

    try:
        result = await COMMANDS[command](pipeline, text)
        print(result)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        await pipeline.close()


if __name__ == "__main__":
    asyncio.run(main())
