"""Data models for dictionary lookups and plugin settings."""
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


# How a translation is written back into the document
INSERT_MODES = ("below", "replace")

_JLPT_TAG = re.compile(r"^jlpt-(n\d)$", re.IGNORECASE)


@dataclass(frozen=True)
class Reading:
    """A written form and its phonetic reading. Either may be missing."""
    form: Optional[str] = None      # e.g. "猫"
    reading: Optional[str] = None   # e.g. "ねこ"


@dataclass(frozen=True)
class Sense:
    """One meaning grouping of a looked-up term."""
    definitions: Tuple[str, ...]                 # Never empty for a usable sense
    parts_of_speech: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()
    notes: Tuple[str, ...] = ()                  # Free-form usage info


@dataclass(frozen=True)
class ExampleSentence:
    """Example sentence attached to the first sense."""
    source: str
    translation: str


@dataclass(frozen=True)
class LookupResult:
    """The dictionary service's reply for one query term."""
    term: str
    readings: Tuple[Reading, ...] = ()
    senses: Tuple[Sense, ...] = ()
    level: Tuple[str, ...] = ()                  # JLPT labels, e.g. ("N5",)
    examples: Tuple[ExampleSentence, ...] = ()

    @classmethod
    def from_jisho(cls, term: str, entry: Dict[str, Any]) -> "LookupResult":
        """
        Build a result from one entry of a Jisho `/api/v1/search/words` reply.

        Missing keys count as empty lists. Senses with no English definitions
        are skipped, so the result may end up with no senses at all.
        """
        readings = tuple(
            Reading(form=item.get("word") or None, reading=item.get("reading") or None)
            for item in entry.get("japanese") or []
        )

        senses = []
        first_kept = None
        for raw in entry.get("senses") or []:
            definitions = tuple(raw.get("english_definitions") or [])
            if not definitions:
                continue
            if first_kept is None:
                first_kept = raw
            senses.append(Sense(
                definitions=definitions,
                parts_of_speech=tuple(raw.get("parts_of_speech") or []),
                tags=tuple(raw.get("tags") or []),
                notes=tuple(raw.get("info") or []),
            ))

        # Sentences belong to the first sense that is actually shown
        examples = ()
        if first_kept is not None:
            examples = tuple(
                ExampleSentence(
                    source=s.get("japanese") or s.get("source") or "",
                    translation=s.get("english") or s.get("translation") or "",
                )
                for s in first_kept.get("sentences") or []
                if isinstance(s, dict)
            )

        return cls(
            term=term,
            readings=readings,
            senses=tuple(senses),
            level=tuple(normalize_jlpt(tag) for tag in entry.get("jlpt") or []),
            examples=examples,
        )


def normalize_jlpt(tag: str) -> str:
    """Turn Jisho's "jlpt-n5" into "N5"; other labels pass through."""
    match = _JLPT_TAG.match(tag.strip())
    if match:
        return match.group(1).upper()
    return tag


@dataclass
class PluginSettings:
    """Settings persisted per plugin."""
    enabled: bool = True
    model: str = ""          # Empty means use Config's model for the backend
    api_key: str = ""        # Empty means use Config.openai_api_key
    insert_mode: str = "below"
