"""Data models for dictionary entries."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Phonetic:
    """One pronunciation of a headword."""

    text: str | None = None  # IPA transcription, e.g. "/tʃɛs/"
    audio: str | None = None  # URL of a recording, None when the service has none

    @property
    def has_audio(self) -> bool:
        """Check if this pronunciation has a playable recording."""
        return bool(self.audio)


@dataclass(frozen=True)
class Sense:
    """A single definition within a meaning."""

    definition: str
    example: str | None = None

    def __str__(self) -> str:
        return self.definition


@dataclass(frozen=True)
class Meaning:
    """Definitions grouped under one part of speech."""

    part_of_speech: str
    senses: tuple[Sense, ...] = ()
    synonyms: tuple[str, ...] = ()

    @property
    def has_synonyms(self) -> bool:
        """Check if any synonyms are listed."""
        return len(self.synonyms) > 0


@dataclass(frozen=True)
class Definition:
    """A decoded dictionary entry for one headword."""

    word: str
    phonetic: str | None = None
    phonetics: tuple[Phonetic, ...] = ()
    meanings: tuple[Meaning, ...] = ()
    source_urls: tuple[str, ...] = ()

    @property
    def audio_url(self) -> str | None:
        """URL of the first pronunciation that has a recording."""
        for phonetic in self.phonetics:
            if phonetic.has_audio:
                return phonetic.audio
        return None

    @property
    def primary_source(self) -> str | None:
        """First source URL, if the service listed any."""
        return self.source_urls[0] if self.source_urls else None

    def __str__(self) -> str:
        return f"{self.word} ({len(self.meanings)} meanings)"
