"""LLM-based translation between Japanese and English."""
import logging
from typing import Dict, List, Optional

import httpx

from config import Config
from errors import ConfigError, TranslationError


logger = logging.getLogger(__name__)

LANGUAGE_NAMES = {"ja": "Japanese", "en": "English"}

# System prompt for translation
SYSTEM_PROMPT = """You are a professional {source}-to-{target} translator.
Translate the given text accurately and naturally.

Rules:
- Preserve the original meaning precisely
- Keep formatting markers like bullet points, numbers, or Markdown exactly as-is
- Do NOT add explanations, romanization or commentary
- Return ONLY the translated text, nothing else"""

# Common prefixes that indicate commentary/instructions (not actual translation)
COMMENTARY_PREFIXES = [
    "translation:", "translation :", "here is", "here's", "the following",
    "rules:", "note:", "note :", "context:", "hint:",
    "翻訳:", "翻訳：", "訳:", "訳：", "注:", "注：",
]

# Lines that are just a metadata keyword
METADATA_LINES = ["translation", "翻訳", "rules"]


def clean_reply(reply: str) -> str:
    """
    Strip commentary the model adds around a translation.

    Drops lines that look like instructions or labels, keeps blank lines inside
    the text and trims them at both ends.
    """
    filtered_lines = []

    for line in reply.split("\n"):
        line_stripped = line.strip()
        if not line_stripped:
            # Preserve empty lines (they might be intentional paragraph breaks)
            filtered_lines.append("")
            continue

        line_lower = line_stripped.lower()
        if any(line_lower.startswith(prefix) for prefix in COMMENTARY_PREFIXES):
            continue
        if line_lower in METADATA_LINES:
            continue

        filtered_lines.append(line_stripped)

    while filtered_lines and not filtered_lines[0]:
        filtered_lines.pop(0)
    while filtered_lines and not filtered_lines[-1]:
        filtered_lines.pop()

    return "\n".join(filtered_lines)


class LLMTranslator:
    """Translator backed by an Ollama or OpenAI-compatible chat API."""

    def __init__(
        self,
        config: Config,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config
        self.backend = config.translator_backend
        if self.backend not in ("ollama", "openai"):
            raise ConfigError(f"Unknown translator backend: {self.backend}")

        self.model = model or config.default_model
        self.api_key = api_key or config.openai_api_key
        if self.backend == "openai":
            self.base_url = config.openai_url.rstrip("/")
        else:
            self.base_url = config.ollama_url.rstrip("/")
        self.client = client or httpx.AsyncClient(timeout=config.request_timeout)

    def _build_messages(self, text: str, source_lang: str, target_lang: str) -> List[Dict[str, str]]:
        system = SYSTEM_PROMPT.format(
            source=LANGUAGE_NAMES.get(source_lang, source_lang),
            target=LANGUAGE_NAMES.get(target_lang, target_lang),
        )
        return [
            {"role": "system", "content": system},
            {"role": "user", "content": text},
        ]

    async def _chat(self, messages: List[Dict[str, str]]) -> str:
        if self.backend == "openai":
            if not self.api_key:
                raise ConfigError("An API key is required for the openai backend")
            response = await self.client.post(
                f"{self.base_url}/v1/chat/completions",
                headers={"Authorization": f"Bearer {self.api_key}"},
                json={
                    "model": self.model,
                    "messages": messages,
                    "temperature": 0.1,
                },
            )
            response.raise_for_status()
            choices = response.json().get("choices") or [{}]
            return choices[0].get("message", {}).get("content") or ""

        response = await self.client.post(
            f"{self.base_url}/api/chat",
            json={
                "model": self.model,
                "messages": messages,
                "temperature": 0.1,
                "stream": False,
            },
        )
        response.raise_for_status()
        return response.json().get("message", {}).get("content") or ""

    async def translate(self, text: str, source_lang: str = "ja", target_lang: str = "en") -> str:
        """
        Translate text with a single chat request.

        Args:
            text: Text to translate
            source_lang: Language code of the text ("ja" or "en")
            target_lang: Language code to translate into

        Returns:
            Translated text with model commentary removed

        Raises:
            ConfigError: If the backend needs an API key and none is set
            TranslationError: If the request fails or the reply is empty
        """
        messages = self._build_messages(text, source_lang, target_lang)

        try:
            reply = await self._chat(messages)
        except httpx.HTTPStatusError as e:
            raise TranslationError(
                f"Translation service returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise TranslationError(f"Could not reach translation service: {e}") from e
        except (ValueError, AttributeError, TypeError, IndexError, KeyError) as e:
            raise TranslationError("Translation service sent an invalid reply") from e

        if not isinstance(reply, str):
            raise TranslationError("Translation service sent an invalid reply")

        translated = clean_reply(reply)
        if not translated:
            raise TranslationError("Translation service returned an empty reply")

        logger.debug(f"Translated {len(text)} chars {source_lang}->{target_lang} with {self.model}")
        return translated

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()
