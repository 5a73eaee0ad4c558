"""Controllers owning the lookup and playback state machines."""

from .lookup_controller import LookupController
from .playback_controller import PlaybackController

__all__ = ["LookupController", "PlaybackController"]
