"""Presenter implementations for output handling."""

from .console_presenter import ConsolePresenter
from .null_presenter import NullPresenter
from .rendering import render_result, render_result_html

__all__ = [
    "ConsolePresenter",
    "NullPresenter",
    "render_result",
    "render_result_html",
]
