"""Null audio backend for testing (no sound)."""

from word_lookup.interfaces import FinishedCallback


class NullAudioBackend:
    """Finish every clip immediately without producing sound (testing implementation)."""

    def __init__(self):
        self.played: list[str] = []

    def play(self, url: str, on_finished: FinishedCallback) -> None:
        """Record the URL and report completion right away."""
        self.played.append(url)
        on_finished(None)
