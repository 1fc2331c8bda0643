# topmark:header:start
#
#   project      : tgcom
#   file         : test_model.py
#   file_relpath : tests/config/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""Mutable/frozen run configuration: parsing, merging, CLI overrides, validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.conftest import make_config, parametrize
from tgcom.config.model import MutableRunConfig, RunConfig
from tgcom.errors import (
    ConfigError,
    InvalidLabelError,
    InvalidMarkerError,
    InvalidRangeSyntaxError,
)
from tgcom.languages import PairedMarker, SimpleMarker
from tgcom.selection import LabelSection, LineRange
from tgcom.transform import Action


def test_defaults_freeze_to_toggle_without_selection() -> None:
    config: RunConfig = MutableRunConfig().freeze()
    assert config.action is Action.TOGGLE
    assert config.dry_run is False
    assert config.diff is False
    assert config.selection is None


def test_freeze_builds_selection() -> None:
    assert make_config(line="2-4").selection == LineRange(2, 4)
    assert make_config(start_label="S", end_label="E").selection == LabelSection("S", "E")


@parametrize(
    "overrides, error",
    [
        ({"action": "explode"}, ConfigError),
        ({"start_label": "S"}, ConfigError),
        ({"end_label": "E"}, ConfigError),
        ({"line": "1", "start_label": "S", "end_label": "E"}, ConfigError),
        ({"language": "go", "marker": "//"}, ConfigError),
        ({"languages": {"x": "a b c"}}, ConfigError),
        ({"extensions": {".x": "nope"}}, ConfigError),
        ({"line": "3-1"}, InvalidRangeSyntaxError),
        ({"start_label": "", "end_label": "E"}, InvalidLabelError),
        ({"marker": "a b c"}, InvalidMarkerError),
    ],
)
def test_freeze_rejects_invalid_drafts(
    overrides: dict[str, object], error: type[Exception]
) -> None:
    with pytest.raises(error):
        make_config(**overrides)


def test_from_toml_dict_reads_all_sections() -> None:
    draft = MutableRunConfig.from_toml_dict(
        {
            "defaults": {"action": "uncomment", "dry_run": True, "diff": False},
            "languages": {"jinja": "{# #}"},
            "extensions": {".j2": "jinja"},
        }
    )
    config = draft.freeze()

    assert config.action is Action.UNCOMMENT
    assert config.dry_run is True
    assert config.diff is False
    assert config.resolve_marker(Path("page.j2")) == PairedMarker("{#", "#}")


def test_from_toml_dict_rejects_bad_values(tmp_path: Path) -> None:
    path = tmp_path / "tgcom.toml"
    with pytest.raises(ConfigError) as excinfo:
        MutableRunConfig.from_toml_dict({"defaults": {"action": "nope"}}, path)
    assert excinfo.value.path == path
    with pytest.raises(ConfigError):
        MutableRunConfig.from_toml_dict({"defaults": {"dry_run": "yes"}})


def test_from_toml_file_pyproject_without_table(tmp_path: Path) -> None:
    p = tmp_path / "pyproject.toml"
    p.write_text('[project]\nname = "x"\n', encoding="utf-8")

    draft = MutableRunConfig.from_toml_file(p)

    assert draft.action is None
    assert draft.config_files == [p]


def test_load_merged_nearer_file_wins(tmp_path: Path) -> None:
    inner = tmp_path / "inner"
    inner.mkdir()
    (tmp_path / "tgcom.toml").write_text(
        'root = true\n[defaults]\naction = "comment"\ndry_run = true\n', encoding="utf-8"
    )
    (inner / "pyproject.toml").write_text(
        '[tool.tgcom.defaults]\naction = "uncomment"\n', encoding="utf-8"
    )

    draft = MutableRunConfig.load_merged(start=inner)

    assert draft.action == "uncomment"
    assert draft.dry_run is True
    assert len(draft.config_files) == 2


def test_load_merged_explicit_files_come_last(tmp_path: Path) -> None:
    (tmp_path / "tgcom.toml").write_text(
        'root = true\n[defaults]\naction = "comment"\n', encoding="utf-8"
    )
    extra = tmp_path / "extra.toml"
    extra.write_text('[defaults]\naction = "toggle"\n', encoding="utf-8")

    merged = MutableRunConfig.load_merged(start=tmp_path, extra_config_files=[extra])
    assert merged.action == "toggle"
    assert merged.config_files[-1] == extra
    assert MutableRunConfig.load_merged(start=tmp_path, no_config=True).action is None


def test_merge_with_keeps_unset_values_and_merges_mappings() -> None:
    base = MutableRunConfig(action="comment", dry_run=True, languages={"a": "#"})
    other = MutableRunConfig(dry_run=False, languages={"b": "//"})

    merged = base.merge_with(other)

    assert merged.action == "comment"
    assert merged.dry_run is False
    assert merged.languages == {"a": "#", "b": "//"}


def test_cli_line_replaces_configured_labels() -> None:
    draft = MutableRunConfig(start_label="S", end_label="E", marker=";;")

    config = draft.apply_cli_args({"line": "2", "language": "go"}).freeze()

    assert config.selection == LineRange(2, 2)
    assert config.resolve_marker(None) == SimpleMarker("//")
    assert draft.config_files[-1] == "<CLI overrides>"


def test_cli_flags_only_switch_on() -> None:
    draft = MutableRunConfig(dry_run=True)

    draft.apply_cli_args({"dry_run": False, "diff": True, "action": None})

    assert draft.dry_run is True
    assert draft.diff is True
    assert draft.action is None
