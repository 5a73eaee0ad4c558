"""Audio playback backends.

The Qt backend is imported lazily by its callers so that PyQt6 is only
loaded when audio is actually played.
"""

from .null_backend import NullAudioBackend

__all__ = ["NullAudioBackend"]
