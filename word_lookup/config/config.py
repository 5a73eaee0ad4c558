"""Configuration classes for Word Lookup."""

from dataclasses import dataclass

from word_lookup import __version__


@dataclass(frozen=True)
class LookupConfig:
    """Immutable configuration for lookup and playback.

    Frozen so that worker threads can share one instance without
    accidental modification mid-lookup.
    """

    # Lookup service settings
    api_url: str = "https://api.dictionaryapi.dev/api/v2/entries/en/"
    request_timeout: float = 10.0  # Seconds before a lookup becomes a network error
    user_agent: str = f"word-lookup/{__version__}"

    # Presentation settings
    initial_word: str = "chess"  # Looked up when the window opens

    # Playback settings
    audio_volume: float = 1.0  # 0.0 (mute) to 1.0 (full)

    def __post_init__(self):
        """Normalize values that may come from user-edited JSON."""
        for name in ("api_url", "user_agent", "initial_word"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise TypeError(f"{name} must be a string, got {type(value).__name__}")
        if not self.api_url.endswith("/"):
            object.__setattr__(self, "api_url", self.api_url + "/")
        if self.request_timeout <= 0:
            raise ValueError(f"request_timeout must be positive, got {self.request_timeout}")
        volume = min(max(float(self.audio_volume), 0.0), 1.0)
        object.__setattr__(self, "audio_volume", volume)
