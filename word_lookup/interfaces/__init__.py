"""Interface protocols for Word Lookup."""

from .audio_backend import AudioBackend, FinishedCallback
from .lookup_client import LookupClient
from .presenter import PresenterProtocol

__all__ = ["AudioBackend", "FinishedCallback", "LookupClient", "PresenterProtocol"]
