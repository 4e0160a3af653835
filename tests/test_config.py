"""Tests for echo_skill.config."""

import pytest

from echo_skill import config as skill_config


def test_load_missing_file(tmp_path):
    assert skill_config.load_config(tmp_path / "missing.json") == {}


def test_load_corrupt_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{oops")
    assert skill_config.load_config(path) == {}


def test_save_and_load(tmp_path):
    path = tmp_path / "nested" / "config.json"
    skill_config.save_config({"application_id": "app-1"}, path)
    assert skill_config.load_config(path) == {"application_id": "app-1"}


def test_resolve_precedence(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    skill_config.save_config({"application_id": "from-file"}, path)
    monkeypatch.delenv(skill_config.APP_ID_ENV, raising=False)
    assert skill_config.resolve_app_id(path=path) == "from-file"

    monkeypatch.setenv(skill_config.APP_ID_ENV, "from-env")
    assert skill_config.resolve_app_id(path=path) == "from-env"
    assert skill_config.resolve_app_id("explicit", path=path) == "explicit"


def test_resolve_nothing_configured(tmp_path, monkeypatch):
    monkeypatch.delenv(skill_config.APP_ID_ENV, raising=False)
    assert skill_config.resolve_app_id(path=tmp_path / "none.json") is None


@pytest.mark.parametrize("content", ["[]", '"x"', "3", "null"])
def test_load_non_object_json(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content)
    assert skill_config.load_config(path) == {}


def test_resolve_with_non_object_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text("[]")
    monkeypatch.delenv(skill_config.APP_ID_ENV, raising=False)
    assert skill_config.resolve_app_id(path=path) is None
