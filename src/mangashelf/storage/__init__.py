"""Read-only in-memory storage for the manga index."""

from .repo import MangaRepository

__all__ = ["MangaRepository"]
