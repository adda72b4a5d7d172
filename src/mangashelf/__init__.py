"""mangashelf: index a manga library directory and serve it over HTTP."""

from .config import AppConfig, load_config
from .index import BuiltIndex, build_index
from .schemas import ChapterInfo, MangaInfo, PageInfo
from .storage import MangaRepository

__all__ = [
    "AppConfig",
    "BuiltIndex",
    "ChapterInfo",
    "MangaInfo",
    "MangaRepository",
    "PageInfo",
    "build_index",
    "load_config",
]
