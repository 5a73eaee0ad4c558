"""GUI presenter implementations."""

from .gui_presenter import GUIPresenter

__all__ = ["GUIPresenter"]
