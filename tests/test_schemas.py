from __future__ import annotations

import pytest
from pydantic import ValidationError

from mangashelf.schemas import MangaDescriptor, json_schema_for, validate_json


def test_descriptor_parses_and_ignores_unknown_keys() -> None:
    raw = (
        '{"name": "Title", "year": 1999, "chapters": ['
        '{"name": "Ch 1", "dir": "ch1", "pages": ["01.png", "02.png"], "extra": true}]}'
    )

    descriptor = validate_json(MangaDescriptor, raw)

    assert descriptor.name == "Title"
    assert descriptor.chapters[0].dir == "ch1"
    assert descriptor.chapters[0].pages == ["01.png", "02.png"]


@pytest.mark.parametrize(
    "raw",
    [
        '{"name": 7}',
        '{"chapters": [{"pages": [1, 2]}]}',
        '{"chapters": {"name": "not a list"}}',
        '"just a string"',
        "{broken",
    ],
)
def test_descriptor_rejects_wrong_types(raw: str) -> None:
    with pytest.raises(ValidationError):
        validate_json(MangaDescriptor, raw)


def test_descriptor_treats_null_as_empty() -> None:
    descriptor = validate_json(
        MangaDescriptor,
        '{"name": null, "chapters": [null, {"name": "Ch", "dir": null, "pages": [null, "a.png"]}]}',
    )

    assert descriptor.name == ""
    assert descriptor.chapters[0].name == ""
    assert descriptor.chapters[0].pages == []
    assert descriptor.chapters[1].dir == ""
    assert descriptor.chapters[1].pages == ["", "a.png"]
    assert validate_json(MangaDescriptor, '{"chapters": null}').chapters == []
    assert validate_json(MangaDescriptor, "null") == MangaDescriptor()


def test_descriptor_keys_match_case_insensitively() -> None:
    descriptor = validate_json(
        MangaDescriptor,
        '{"Name": "Title", "CHAPTERS": [{"Name": "Ch 1", "Dir": "c1", "Pages": ["01.png"]}]}',
    )

    assert descriptor.name == "Title"
    assert descriptor.chapters[0].name == "Ch 1"
    assert descriptor.chapters[0].dir == "c1"
    assert descriptor.chapters[0].pages == ["01.png"]
    assert validate_json(MangaDescriptor, '{"name": "A", "NAME": "B"}').name == "B"
    assert validate_json(MangaDescriptor, '{"name": "A", "Name": null}').name == "A"


def test_json_schema_utility() -> None:
    schema = json_schema_for(MangaDescriptor)

    assert schema["title"] == "MangaDescriptor"
    assert "chapters" in schema["properties"]
