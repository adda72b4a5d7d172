from __future__ import annotations

from pathlib import Path
from typing import Any, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictStr,
    field_validator,
    model_validator,
)

TModel = TypeVar("TModel", bound=BaseModel)


class DTOBase(BaseModel):
    model_config = ConfigDict(extra="forbid")


class MangaInfo(DTOBase):
    id: int = Field(ge=0)
    name: str
    chapter_ids: list[int] = Field(default_factory=list)


class ChapterInfo(DTOBase):
    id: int = Field(ge=0)
    manga_id: int = Field(ge=0)
    name: str
    page_ids: list[int] = Field(default_factory=list)


class PageInfo(DTOBase):
    id: int = Field(ge=0)
    chapter_id: int = Field(ge=0)
    path: Path  # absolute


class DescriptorBase(BaseModel):
    """Descriptor keys match case-insensitively and ``null`` means empty."""

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def fold_keys_and_nulls(cls, data: Any) -> Any:
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data

        folded: dict[str, Any] = {}
        for key, value in data.items():
            # null leaves an earlier value for the same field in place
            if isinstance(key, str) and value is not None:
                folded[key.lower()] = value
        return folded


class ChapterDescriptor(DescriptorBase):
    name: StrictStr = ""
    dir: StrictStr = ""
    pages: list[StrictStr] = Field(default_factory=list)

    @field_validator("pages", mode="before")
    @classmethod
    def null_pages_to_empty(cls, value: Any) -> Any:
        if isinstance(value, list):
            return ["" if page is None else page for page in value]
        return value


class MangaDescriptor(DescriptorBase):
    """Contents of a collection's `.mangainfo` file."""

    name: StrictStr = ""
    chapters: list[ChapterDescriptor] = Field(default_factory=list)


def json_schema_for(model_cls: type[TModel]) -> dict[str, Any]:
    return model_cls.model_json_schema()


def validate_json(model_cls: type[TModel], payload: str | bytes | bytearray) -> TModel:
    return model_cls.model_validate_json(payload)
