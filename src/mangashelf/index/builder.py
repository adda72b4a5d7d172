from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import ValidationError

from mangashelf.schemas import (
    ChapterInfo,
    MangaDescriptor,
    MangaInfo,
    PageInfo,
    validate_json,
)

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTOR_NAME = ".mangainfo"


@dataclass(slots=True, frozen=True)
class CollectionLoaded:
    directory: Path
    descriptor: MangaDescriptor


@dataclass(slots=True, frozen=True)
class CollectionSkipped:
    directory: Path
    reason: str


CollectionLoad = CollectionLoaded | CollectionSkipped


@dataclass(slots=True)
class BuiltIndex:
    mangas: list[MangaInfo] = field(default_factory=list)
    chapters: list[ChapterInfo] = field(default_factory=list)
    pages: list[PageInfo] = field(default_factory=list)
    skipped: list[CollectionSkipped] = field(default_factory=list)


def build_index(
    root: str | Path,
    *,
    descriptor_name: str = DEFAULT_DESCRIPTOR_NAME,
) -> BuiltIndex:
    """Index every collection directory directly under ``root``.

    Entries are visited in name order so identifiers stay stable for an
    unchanged tree. A collection whose descriptor is missing or malformed is
    logged and left out; it never aborts the rest of the walk. Failing to list
    ``root`` itself raises the underlying ``OSError``.
    """
    root_path = Path(root).resolve()
    entries = sorted(root_path.iterdir(), key=lambda entry: entry.name)

    index = BuiltIndex()
    for entry in entries:
        if entry.is_symlink() or not entry.is_dir():
            continue

        result = load_collection(entry, descriptor_name=descriptor_name)
        if isinstance(result, CollectionSkipped):
            logger.warning(
                "index skip collection dir=%s reason=%s", entry.name, result.reason
            )
            index.skipped.append(result)
            continue

        _append_collection(index, result)

    logger.info(
        "index built root=%s mangas=%d chapters=%d pages=%d skipped=%d",
        root_path,
        len(index.mangas),
        len(index.chapters),
        len(index.pages),
        len(index.skipped),
    )
    return index


def load_collection(
    directory: Path,
    *,
    descriptor_name: str = DEFAULT_DESCRIPTOR_NAME,
) -> CollectionLoad:
    descriptor_path = directory / descriptor_name
    try:
        raw = descriptor_path.read_bytes()
    except FileNotFoundError:
        return CollectionSkipped(directory, f"{descriptor_name} not found")
    except OSError as exc:
        return CollectionSkipped(directory, f"cannot read {descriptor_name}: {exc}")

    try:
        descriptor = validate_json(MangaDescriptor, raw)
    except ValidationError as exc:
        return CollectionSkipped(directory, _describe_validation_error(descriptor_name, exc))

    return CollectionLoaded(directory, descriptor)


def _append_collection(index: BuiltIndex, loaded: CollectionLoaded) -> None:
    manga_id = len(index.mangas)
    chapter_ids: list[int] = []

    for chapter in loaded.descriptor.chapters:
        chapter_id = len(index.chapters)
        page_ids: list[int] = []

        for page_file in chapter.pages:
            page = PageInfo(
                id=len(index.pages),
                chapter_id=chapter_id,
                path=_join_page_path(loaded.directory, chapter.dir, page_file),
            )
            index.pages.append(page)
            page_ids.append(page.id)

        index.chapters.append(
            ChapterInfo(
                id=chapter_id,
                manga_id=manga_id,
                name=chapter.name,
                page_ids=page_ids,
            )
        )
        chapter_ids.append(chapter_id)

    index.mangas.append(
        MangaInfo(id=manga_id, name=loaded.descriptor.name, chapter_ids=chapter_ids)
    )


def _join_page_path(directory: Path, chapter_dir: str, page_file: str) -> Path:
    # Absolute descriptor parts stay under the collection directory.
    joined = os.path.join(str(directory), chapter_dir.lstrip("/"), page_file.lstrip("/"))
    return Path(os.path.normpath(joined))


def _describe_validation_error(descriptor_name: str, exc: ValidationError) -> str:
    errors = exc.errors()
    if any(error["type"] == "json_invalid" for error in errors):
        return f"invalid JSON in {descriptor_name}: {errors[0]['msg']}"

    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}"
        for error in errors
    )
    return f"invalid {descriptor_name}: {details}"
