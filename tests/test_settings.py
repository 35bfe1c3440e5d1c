import json
from pathlib import Path

import pytest

from archivelink.exceptions import InvalidOutputPathError
from archivelink.settings import ArchiveSettings, SettingsStore, load_settings, save_settings


def test_defaults():
    settings = ArchiveSettings()
    assert settings.cli_opts == ["--no-js", "--isolate"]
    assert settings.output_path == str(Path.home())
    assert settings.flags == "--no-js --isolate"


def test_defaults_are_not_shared():
    first = ArchiveSettings()
    first.cli_opts.append("--extra")
    assert ArchiveSettings().cli_opts == ["--no-js", "--isolate"]


def test_load_missing_file_gives_defaults(tmp_path):
    assert load_settings(tmp_path / "missing.json") == ArchiveSettings()


def test_load_overlays_stored_values(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"output_path": "/srv/archive", "unknown": 1}))

    settings = load_settings(path)

    assert settings.output_path == "/srv/archive"
    assert settings.cli_opts == ["--no-js", "--isolate"]


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_load_corrupt_file_gives_defaults(tmp_path, content):
    path = tmp_path / "settings.json"
    path.write_text(content)
    assert load_settings(path) == ArchiveSettings()


def test_save_then_load(tmp_path):
    path = tmp_path / "nested" / "settings.json"
    save_settings(ArchiveSettings(cli_opts=["--no-css"], output_path="/tmp"), path)

    assert json.loads(path.read_text()) == {"cli_opts": ["--no-css"], "output_path": "/tmp"}
    assert load_settings(path).cli_opts == ["--no-css"]


def test_set_flags_splits_on_spaces_and_saves(tmp_path):
    store = SettingsStore(tmp_path / "settings.json")

    store.set_flags("--no-js --no-images")

    assert store.settings.cli_opts == ["--no-js", "--no-images"]
    assert load_settings(store.path).cli_opts == ["--no-js", "--no-images"]


def test_set_flags_empty_string(tmp_path):
    store = SettingsStore(tmp_path / "settings.json")
    store.set_flags("")
    assert store.settings.cli_opts == [""]


def test_set_output_path_accepts_directory(tmp_path):
    out = tmp_path / "archive"
    out.mkdir()
    store = SettingsStore(tmp_path / "settings.json")

    store.set_output_path(str(out))

    assert store.settings.output_path == str(out.resolve())
    assert load_settings(store.path).output_path == str(out.resolve())


@pytest.mark.parametrize("name", ["missing", "a-file.txt", ""])
def test_set_output_path_rejects_non_directories(tmp_path, name):
    (tmp_path / "a-file.txt").write_text("x")
    store = SettingsStore(tmp_path / "settings.json")
    value = str(tmp_path / name) if name else ""

    with pytest.raises(InvalidOutputPathError, match="Invalid path will not be saved."):
        store.set_output_path(value)

    assert store.settings.output_path == str(Path.home())
    assert not store.path.exists()


def test_set_output_path_stores_absolute_folder(tmp_path, monkeypatch):
    (tmp_path / "archive").mkdir()
    monkeypatch.chdir(tmp_path)
    store = SettingsStore(tmp_path / "settings.json")

    store.set_output_path("archive")

    assert Path(store.settings.output_path).is_absolute()
    assert store.settings.output_path == str((tmp_path / "archive").resolve())


@pytest.mark.parametrize(
    "stored, field_name",
    [
        ({"output_path": None}, "output_path"),
        ({"output_path": ""}, "output_path"),
        ({"output_path": 42}, "output_path"),
        ({"cli_opts": "--no-js"}, "cli_opts"),
        ({"cli_opts": ["--no-js", 3]}, "cli_opts"),
    ],
)
def test_load_keeps_default_for_wrongly_typed_value(tmp_path, stored, field_name):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(stored))

    settings = load_settings(path)

    assert getattr(settings, field_name) == getattr(ArchiveSettings(), field_name)


def test_load_keeps_valid_keys_next_to_invalid_ones(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"output_path": None, "cli_opts": ["--no-css"]}))

    settings = load_settings(path)

    assert settings.output_path == str(Path.home())
    assert settings.cli_opts == ["--no-css"]


def test_reload_updates_record_in_place(tmp_path):
    path = tmp_path / "settings.json"
    store = SettingsStore(path)
    record = store.settings

    save_settings(ArchiveSettings(cli_opts=["--no-css"], output_path="/srv"), path)
    store.reload()

    assert store.settings is record
    assert record.cli_opts == ["--no-css"]
    assert record.output_path == "/srv"
