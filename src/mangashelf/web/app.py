from __future__ import annotations

import logging
import re
import stat
from pathlib import Path

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import FileResponse, HTMLResponse
from fastapi.staticfiles import StaticFiles

from mangashelf.storage import MangaRepository

from .render import render_chapter, render_home, render_manga

logger = logging.getLogger(__name__)

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def create_app(repo: MangaRepository, *, asset_dir: str | Path | None = None) -> FastAPI:
    app = FastAPI(title="mangashelf", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.repo = repo

    @app.get("/", response_class=HTMLResponse)
    def home() -> HTMLResponse:
        mangas = sorted(repo.get_all_mangas(), key=lambda manga: manga.name)
        return HTMLResponse(render_home(mangas))

    @app.get("/m/{manga_id}", response_class=HTMLResponse)
    def manga_page(manga_id: str) -> HTMLResponse:
        manga = repo.get_manga(_parse_id(manga_id))
        if manga is None:
            raise HTTPException(status_code=404, detail="Not Found")
        return HTMLResponse(render_manga(manga, repo.get_chapters(manga.id)))

    @app.get("/c/{chapter_id}", response_class=HTMLResponse)
    def chapter_page(chapter_id: str) -> HTMLResponse:
        chapter = repo.get_chapter(_parse_id(chapter_id))
        if chapter is None:
            raise HTTPException(status_code=404, detail="Not Found")

        manga = repo.get_manga(chapter.manga_id)
        if manga is None:
            raise HTTPException(status_code=404, detail="Not Found")
        return HTMLResponse(render_chapter(manga, chapter, repo.get_pages(chapter.id)))

    @app.get("/p/{page_id}")
    def page_file(page_id: str, request: Request) -> FileResponse:
        page = repo.get_page_by_id(_parse_id(page_id))
        if page is None:
            raise HTTPException(status_code=404, detail="Not Found")

        try:
            mode = page.path.stat().st_mode
        except FileNotFoundError as exc:
            raise HTTPException(status_code=404, detail="Not Found") from exc
        except OSError as exc:
            logger.error("page stat failed path=%s error=%s", request.url.path, exc)
            raise HTTPException(status_code=500, detail="Internal Server Error") from exc

        if not stat.S_ISREG(mode):
            logger.error("page is not a file path=%s file=%s", request.url.path, page.path)
            raise HTTPException(status_code=500, detail="Internal Server Error")

        return FileResponse(page.path)

    if asset_dir is not None:
        app.mount("/asset", StaticFiles(directory=asset_dir), name="asset")

    return app


def _parse_id(raw: str) -> int:
    if not _ID_PATTERN.fullmatch(raw):
        raise HTTPException(status_code=404, detail="Not Found")
    return int(raw)
