"""Render a dictionary lookup result as a Markdown block."""
from typing import List

from errors import InvalidResult
from models import LookupResult, Reading


INDENT = "   "
SEPARATOR = ", "


def _reading_line(reading: Reading) -> str:
    parts = []
    if reading.form:
        parts.append(reading.form)
    if reading.reading:
        parts.append(f"({reading.reading})")
    return " ".join(parts)


def _numbered(index: int, text: str) -> str:
    # An entry with nothing to show still keeps its number
    return f"{index}. {text}".rstrip()


def format_lookup(term: str, result: LookupResult) -> str:
    """
    Format a lookup result as Markdown.

    Sections appear in a fixed order: heading, readings, meanings, then the
    JLPT level and example sentences when the result has any. Entries keep
    their input order and are numbered from 1.

    Args:
        term: The query as the user typed it, used verbatim in the heading
        result: Lookup result with at least one sense

    Returns:
        Markdown text ending with a newline

    Raises:
        InvalidResult: If the result has no senses
    """
    if not result.senses:
        raise InvalidResult(f"No senses to format for '{term}'")

    sections: List[List[str]] = [[f"### {term}"]]

    readings = ["**Readings:**"]
    for i, reading in enumerate(result.readings, start=1):
        readings.append(_numbered(i, _reading_line(reading)))
    sections.append(readings)

    meanings = ["**Meanings:**"]
    for i, sense in enumerate(result.senses, start=1):
        meanings.append(_numbered(i, SEPARATOR.join(sense.definitions)))
        if sense.parts_of_speech:
            meanings.append(f"{INDENT}_Part of speech:_ {SEPARATOR.join(sense.parts_of_speech)}")
        if sense.tags:
            meanings.append(f"{INDENT}_Tags:_ {SEPARATOR.join(sense.tags)}")
        if sense.notes:
            meanings.append(f"{INDENT}_Info:_ {SEPARATOR.join(sense.notes)}")
    sections.append(meanings)

    if result.level:
        sections.append([f"**JLPT Level:** {SEPARATOR.join(result.level)}"])

    if result.examples:
        examples = ["**Example Sentences:**"]
        for i, example in enumerate(result.examples, start=1):
            examples.append(_numbered(i, example.source))
            examples.append(f"{INDENT}{example.translation}")
        sections.append(examples)

    return "\n\n".join("\n".join(lines) for lines in sections) + "\n"
