"""HTTP serving for the manga index."""

from .app import create_app
from .render import render_chapter, render_home, render_manga

__all__ = [
    "create_app",
    "render_chapter",
    "render_home",
    "render_manga",
]
