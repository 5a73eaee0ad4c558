"""Background worker threads for GUI."""

from .base_worker import CancellableWorker
from .lookup_worker import LookupWorkerThread

__all__ = [
    "CancellableWorker",
    "LookupWorkerThread",
]
