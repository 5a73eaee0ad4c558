"""Pytest configuration and shared fixtures."""

import pytest

from word_lookup.config import LookupConfig
from word_lookup.presenters import NullPresenter


@pytest.fixture
def test_config():
    """Provide a test configuration with a short timeout."""
    return LookupConfig(
        api_url="https://dictionary.test/api/v2/entries/en/",
        request_timeout=2.0,
        initial_word="chess",
        audio_volume=0.5,
    )


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def chess_payload():
    """Provide a successful service payload with two entries."""
    return [
        {
            "word": "chess",
            "phonetic": "/tʃɛs/",
            "phonetics": [
                {"text": "/tʃɛs/", "audio": ""},
                {"text": "/tʃɛs/", "audio": "https://audio.test/chess-us.mp3"},
            ],
            "meanings": [
                {
                    "partOfSpeech": "noun",
                    "definitions": [
                        {
                            "definition": "A board game for two players.",
                            "example": "Let's play chess.",
                        },
                        {"definition": "A pontoon in a bridge."},
                    ],
                    "synonyms": ["chequers"],
                }
            ],
            "sourceUrls": ["https://en.wiktionary.org/wiki/chess"],
        },
        {
            "word": "chess",
            "phonetics": [],
            "meanings": [
                {"partOfSpeech": "noun", "definitions": [{"definition": "A type of grass."}]}
            ],
        },
    ]


@pytest.fixture
def not_found_payload():
    """Provide the service's "no definitions" answer."""
    return {
        "title": "No Definitions Found",
        "message": "Sorry pal, we couldn't find definitions for the word you were looking for.",
        "resolution": "You can try the search again at later time or head to the web instead.",
    }


class StubClient:
    """A LookupClient that returns canned payloads and records every call."""

    def __init__(self, payload=None, error=None):
        self.payload = payload
        self.error = error
        self.calls = []

    def fetch_entries(self, word):
        self.calls.append(word)
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def stub_client():
    """Factory fixture for StubClient instances."""

    def _make(payload=None, error=None):
        return StubClient(payload=payload, error=error)

    return _make


class ManualAudioBackend:
    """An AudioBackend whose clips finish only when the test says so."""

    def __init__(self):
        self.played = []
        self._callbacks = []

    def play(self, url, on_finished):
        self.played.append(url)
        self._callbacks.append(on_finished)

    def finish(self, index=-1, error=None):
        """Report completion (or failure) of a started clip."""
        self._callbacks[index](error)


@pytest.fixture
def manual_backend():
    """Provide an audio backend with test-controlled completion."""
    return ManualAudioBackend()
