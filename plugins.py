"""Right-click menu commands: two translators and a dictionary lookup."""
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

import httpx

from config import Config, load_settings, sanitize_for_log, save_settings
from editor import EditorHost
from errors import ConfigError, HelperError, InvalidResult
from formatting import format_lookup
from lookup import JishoClient
from models import PluginSettings
from translation import LLMTranslator


logger = logging.getLogger(__name__)


class HelperPlugin(ABC):
    """
    Base class for a menu command.

    Subclasses implement `process` (text in, text out, raises HelperError) and
    `write_result` (how the output lands in the document). `run` ties the two
    together and turns every HelperError into a notification, so the host
    never sees an exception.
    """

    id = ""
    title = ""
    empty_selection_message = "Select some text first."

    def __init__(self, config: Config, client: Optional[httpx.AsyncClient] = None):
        self.config = config
        self.client = client  # Shared client; None means one per request
        self.settings = PluginSettings()

    def load(self, editor: EditorHost) -> None:
        """Load persisted settings and register the menu item."""
        try:
            self.settings = load_settings(self.config, self.id)
        except ConfigError as e:
            logger.warning(f"Bad settings for {self.id} ({e}); using defaults")
            editor.notify(f"{self.title}: {e} Using default settings.")
            self.settings = PluginSettings()

        if not self.settings.enabled:
            logger.info(f"Plugin {self.id} is disabled, not registering menu item")
            return
        editor.add_menu_item(self.title, self.run)
        logger.info(f"Loaded plugin {self.id}")

    def unload(self) -> None:
        """Persist settings."""
        save_settings(self.config, self.id, self.settings)
        logger.info(f"Unloaded plugin {self.id}")

    @abstractmethod
    async def process(self, text: str) -> str:
        ...

    @abstractmethod
    def write_result(self, editor: EditorHost, selection: str, output: str) -> None:
        ...

    def failure_message(self, error: HelperError, text: str) -> str:
        return str(error)

    async def run(self, editor: EditorHost) -> None:
        selection = editor.get_selection()
        text = selection.strip()
        if not text:
            editor.notify(self.empty_selection_message)
            return

        logger.info(f"{self.id}: processing selection {sanitize_for_log(text)}")
        try:
            output = await self.process(text)
        except HelperError as e:
            logger.warning(f"{self.id} failed: {e}")
            editor.notify(self.failure_message(e, text))
            return

        self.write_result(editor, selection, output)


class TranslatePlugin(HelperPlugin):
    """Translate the selection and write the translation back."""

    source_lang = ""
    target_lang = ""
    empty_selection_message = "Select some text to translate."

    async def process(self, text: str) -> str:
        translator = LLMTranslator(
            self.config,
            model=self.settings.model or None,
            api_key=self.settings.api_key or None,
            client=self.client,
        )
        try:
            return await translator.translate(text, self.source_lang, self.target_lang)
        finally:
            if self.client is None:
                await translator.close()

    def write_result(self, editor: EditorHost, selection: str, output: str) -> None:
        if self.settings.insert_mode == "replace":
            editor.replace_selection(output)
        else:
            editor.replace_selection(f"{selection}\n\n{output}")
        editor.notify("Translation inserted.")

    def failure_message(self, error: HelperError, text: str) -> str:
        return f"Translation failed: {error}"


class TranslateToEnglishPlugin(TranslatePlugin):
    id = "translate-to-english"
    title = "Translate to English"
    source_lang = "ja"
    target_lang = "en"


class TranslateToJapanesePlugin(TranslatePlugin):
    id = "translate-to-japanese"
    title = "Translate to Japanese"
    source_lang = "en"
    target_lang = "ja"


class DictionaryLookupPlugin(HelperPlugin):
    """Look up the selected word and append the entry to the document."""

    id = "dictionary-lookup"
    title = "Look up in dictionary"
    empty_selection_message = "Select a word to look up."

    async def process(self, text: str) -> str:
        jisho = JishoClient(self.config, client=self.client)
        try:
            result = await jisho.search(text)
        finally:
            if self.client is None:
                await jisho.close()

        if result is None:
            raise InvalidResult(f'No information found for "{text}".')
        return format_lookup(text, result)

    def write_result(self, editor: EditorHost, selection: str, output: str) -> None:
        editor.set_value(f"{editor.get_value()}\n\n{output}")
        editor.notify(f'Added dictionary entry for "{selection.strip()}".')

    def failure_message(self, error: HelperError, text: str) -> str:
        if isinstance(error, InvalidResult):
            return f'No information found for "{text}".'
        return f"Dictionary lookup failed: {error}"


PLUGIN_CLASSES = [TranslateToEnglishPlugin, TranslateToJapanesePlugin, DictionaryLookupPlugin]


def register_plugins(
    editor: EditorHost,
    config: Config,
    client: Optional[httpx.AsyncClient] = None,
) -> List[HelperPlugin]:
    """Instantiate and load every plugin against an editor."""
    plugins = [cls(config, client=client) for cls in PLUGIN_CLASSES]
    for plugin in plugins:
        plugin.load(editor)
    return plugins


def get_plugin_class(plugin_id: str):
    for cls in PLUGIN_CLASSES:
        if cls.id == plugin_id:
            return cls
    raise KeyError(plugin_id)
