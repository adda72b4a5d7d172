from __future__ import annotations

import json
from pathlib import Path

import pytest

from mangashelf.config import AppConfig, load_config

ROOT = Path(__file__).resolve().parents[1]


def test_config_example_load_and_validate() -> None:
    config = load_config(ROOT / "config" / "config.example.yaml")

    assert isinstance(config, AppConfig)
    assert config.library.root == "data/library"
    assert config.library.descriptor_name == ".mangainfo"
    assert config.server.port == 8080
    assert config.server.asset_dir is None


def test_load_config_defaults_without_path() -> None:
    config = load_config(None)

    assert config.library.root == "."
    assert config.server.host == "0.0.0.0"
    assert config.server.shutdown_timeout_seconds == 30


def test_load_config_json_partial_sections(tmp_path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"server": {"port": 9000}}), encoding="utf-8")

    config = load_config(config_path)

    assert config.server.port == 9000
    assert config.library.descriptor_name == ".mangainfo"


@pytest.mark.parametrize(
    "payload",
    [
        {"server": {"port": 70000}},
        {"library": {"root": "  "}},
        {"library": {"descriptor_name": "nested/.mangainfo"}},
        {"unknown": True},
    ],
)
def test_load_config_rejects_invalid_values(tmp_path, payload) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps(payload), encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid configuration"):
        load_config(config_path)


def test_load_config_rejects_non_object_root(tmp_path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ValueError, match="root must be an object"):
        load_config(config_path)
