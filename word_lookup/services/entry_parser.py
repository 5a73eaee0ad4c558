"""Decoding of dictionary service payloads into entry models.

The service's JSON is loosely shaped: optional fields may be missing,
empty or null. Parsing is tolerant of absent optional data and strict
about the fields an entry cannot do without (the headword, meanings
that are objects).
"""

from typing import Any

from word_lookup.exceptions import MalformedResponseError
from word_lookup.models import Definition, Meaning, Phonetic, Sense


def is_not_found_payload(payload: Any) -> bool:
    """Check whether a payload is the service's "no definitions" answer.

    The service reports unknown words with a JSON object (not an array)
    carrying string ``title`` and ``message`` fields.
    """
    return (
        isinstance(payload, dict)
        and isinstance(payload.get("title"), str)
        and isinstance(payload.get("message"), str)
    )


def select_primary_entry(entries: list[Any]) -> dict[str, Any]:
    """Pick the entry to show from a successful response.

    The service may return several entries for one word (separate
    etymologies or headwords). Only the first one is shown; the rest are
    dropped on purpose.

    Raises:
        MalformedResponseError: If there is no usable first entry
    """
    if not entries:
        raise MalformedResponseError("Entry list is empty")
    first = entries[0]
    if not isinstance(first, dict):
        raise MalformedResponseError(f"Entry is {type(first).__name__}, expected object")
    return first


def parse_entry(raw: dict[str, Any]) -> Definition:
    """Convert one raw entry object into a Definition.

    Args:
        raw: Entry object as decoded from JSON

    Returns:
        Decoded Definition

    Raises:
        MalformedResponseError: If the headword is missing or a nested
            collection has the wrong type
    """
    word = _get_str(raw.get("word"))
    if word is None:
        raise MalformedResponseError("Entry has no headword")

    return Definition(
        word=word,
        phonetic=_get_str(raw.get("phonetic")),
        phonetics=tuple(_parse_phonetic(p) for p in _get_list(raw, "phonetics")),
        meanings=tuple(_parse_meaning(m) for m in _get_list(raw, "meanings")),
        source_urls=tuple(
            url for url in (_get_str(u) for u in _get_list(raw, "sourceUrls")) if url
        ),
    )


def _parse_phonetic(raw: Any) -> Phonetic:
    obj = _require_dict(raw, "phonetic")
    return Phonetic(text=_get_str(obj.get("text")), audio=_get_str(obj.get("audio")))


def _parse_meaning(raw: Any) -> Meaning:
    obj = _require_dict(raw, "meaning")
    senses = []
    for item in _get_list(obj, "definitions"):
        sense = _require_dict(item, "definition")
        text = _get_str(sense.get("definition"))
        if text is None:
            continue
        senses.append(Sense(definition=text, example=_get_str(sense.get("example"))))

    synonyms = tuple(s for s in (_get_str(x) for x in _get_list(obj, "synonyms")) if s)
    return Meaning(
        part_of_speech=_get_str(obj.get("partOfSpeech")) or "",
        senses=tuple(senses),
        synonyms=synonyms,
    )


def _require_dict(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise MalformedResponseError(f"Expected {what} object, got {type(value).__name__}")
    return value


def _get_list(obj: dict[str, Any], key: str) -> list[Any]:
    """Return a list field, treating a missing or null field as empty."""
    value = obj.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise MalformedResponseError(f"Field '{key}' is {type(value).__name__}, expected list")
    return value


def _get_str(value: Any) -> str | None:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return None
