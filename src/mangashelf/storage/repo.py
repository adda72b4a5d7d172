from __future__ import annotations

from collections.abc import Sequence

from mangashelf.schemas import ChapterInfo, MangaInfo, PageInfo


class MangaRepository:
    """Read-only access to an index built by ``build_index``.

    Chapter and page identifiers double as positions in their lists, so those
    lookups are bounds-checked indexing. The constructor refuses input that
    breaks this. Every accessor returns copies; callers cannot reach the
    stored entities.
    """

    def __init__(
        self,
        mangas: Sequence[MangaInfo],
        chapters: Sequence[ChapterInfo],
        pages: Sequence[PageInfo],
    ) -> None:
        _ensure_position_ids("chapter", chapters)
        _ensure_position_ids("page", pages)

        self._mangas = tuple(manga.model_copy(deep=True) for manga in mangas)
        self._chapters = tuple(chapter.model_copy(deep=True) for chapter in chapters)
        self._pages = tuple(page.model_copy(deep=True) for page in pages)

    def get_all_mangas(self) -> list[MangaInfo]:
        return [manga.model_copy(deep=True) for manga in self._mangas]

    def get_manga(self, manga_id: int) -> MangaInfo | None:
        # Scan by stored id; manga ids are not assumed to be positions.
        for manga in self._mangas:
            if manga.id == manga_id:
                return manga.model_copy(deep=True)
        return None

    def get_chapter(self, chapter_id: int) -> ChapterInfo | None:
        if 0 <= chapter_id < len(self._chapters):
            return self._chapters[chapter_id].model_copy(deep=True)
        return None

    def get_page_by_id(self, page_id: int) -> PageInfo | None:
        if 0 <= page_id < len(self._pages):
            return self._pages[page_id].model_copy(deep=True)
        return None

    def get_chapters(self, manga_id: int) -> list[ChapterInfo]:
        manga = self.get_manga(manga_id)
        if manga is None:
            return []
        return [
            chapter
            for chapter in (self.get_chapter(chapter_id) for chapter_id in manga.chapter_ids)
            if chapter is not None
        ]

    def get_pages(self, chapter_id: int) -> list[PageInfo]:
        chapter = self.get_chapter(chapter_id)
        if chapter is None:
            return []
        return [
            page
            for page in (self.get_page_by_id(page_id) for page_id in chapter.page_ids)
            if page is not None
        ]

    def counts(self) -> tuple[int, int, int]:
        return len(self._mangas), len(self._chapters), len(self._pages)


def _ensure_position_ids(kind: str, entities: Sequence[ChapterInfo] | Sequence[PageInfo]) -> None:
    for position, entity in enumerate(entities):
        if entity.id != position:
            raise ValueError(f"{kind} id={entity.id} does not match its position {position}")
