from __future__ import annotations

from html import escape

from mangashelf.schemas import ChapterInfo, MangaInfo, PageInfo

PAGE_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>__TITLE__</title>
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <link rel="stylesheet" href="/asset/style.css">
</head>
<body>
__BODY__
</body>
</html>
"""


def render_home(mangas: list[MangaInfo]) -> str:
    if not mangas:
        body = "<h1>Library</h1>\n<p>no manga found</p>"
        return _page("Library", body)

    items = "\n".join(
        f'  <li><a href="/m/{manga.id}">{escape(manga.name)}</a></li>' for manga in mangas
    )
    return _page("Library", f"<h1>Library</h1>\n<ul>\n{items}\n</ul>")


def render_manga(manga: MangaInfo, chapters: list[ChapterInfo]) -> str:
    items = "\n".join(
        f'  <li><a href="/c/{chapter.id}">{escape(chapter.name)}</a></li>'
        for chapter in chapters
    )
    body = (
        '<p><a href="/">Library</a></p>\n'
        f"<h1>{escape(manga.name)}</h1>\n"
        f"<ol>\n{items}\n</ol>"
    )
    return _page(manga.name, body)


def render_chapter(manga: MangaInfo, chapter: ChapterInfo, pages: list[PageInfo]) -> str:
    images = "\n".join(
        f'  <img src="/p/{page.id}" alt="page {index}" loading="lazy">'
        for index, page in enumerate(pages, start=1)
    )
    body = (
        f'<p><a href="/">Library</a> / <a href="/m/{manga.id}">{escape(manga.name)}</a></p>\n'
        f"<h1>{escape(chapter.name)}</h1>\n"
        f'<div class="pages">\n{images}\n</div>'
    )
    return _page(f"{manga.name} - {chapter.name}", body)


def _page(title: str, body: str) -> str:
    return PAGE_HTML.replace("__TITLE__", escape(title)).replace("__BODY__", body)
