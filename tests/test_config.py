from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from blueprint_playground.config import CONFIG_ENV_VAR, EditorConfig, load_config


def test_defaults_match_toolbar_options():
    config = EditorConfig()
    assert config.grid_pitch == 20.0
    assert config.thickness == 4.0
    assert config.grid_color == "#e5e7eb"
    assert config.bounds() == (800.0, 600.0)


@pytest.mark.parametrize("field", ["grid_pitch", "thickness", "canvas_width", "canvas_height"])
def test_non_positive_values_rejected(field):
    with pytest.raises(ValidationError):
        EditorConfig(**{field: 0})


@pytest.mark.parametrize("field", ["grid_pitch", "thickness", "canvas_width", "canvas_height"])
@pytest.mark.parametrize("value", [float("inf"), float("nan")])
def test_non_finite_values_rejected(field, value):
    with pytest.raises(ValidationError):
        EditorConfig(**{field: value})


def test_grid_color_must_be_hex():
    with pytest.raises(ValidationError):
        EditorConfig(grid_color="grey")
    assert EditorConfig(grid_color="#9CA3AF").grid_color == "#9ca3af"


def test_updated_validates_and_skips_none():
    config = EditorConfig().updated(grid_pitch=40.0, thickness=None)
    assert config.grid_pitch == 40.0
    assert config.thickness == 4.0
    with pytest.raises(ValidationError):
        config.updated(thickness=-1.0)


def test_missing_file_gives_defaults(tmp_path):
    assert load_config(tmp_path / "absent.json") == EditorConfig()


def test_load_from_file(tmp_path):
    path = tmp_path / "blueprint.json"
    path.write_text(json.dumps({"grid_pitch": 30, "grid_color": "#4b5563"}), encoding="utf-8")
    config = load_config(path)
    assert config.grid_pitch == 30.0
    assert config.grid_color == "#4b5563"
    assert config.thickness == 4.0


def test_env_var_selects_file(tmp_path, monkeypatch):
    path = tmp_path / "env.json"
    path.write_text(json.dumps({"thickness": 6}), encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert load_config().thickness == 6.0


def test_invalid_file_contents(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)
    path.write_text(json.dumps({"grid_pitch": -2}), encoding="utf-8")
    with pytest.raises(ValidationError):
        load_config(path)
