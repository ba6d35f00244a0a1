"""Editor configuration and the option catalogues offered by the UI."""
from __future__ import annotations

import json
import os
import re
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger
from pydantic import BaseModel, Field, field_validator

CONFIG_ENV_VAR = "BLUEPRINT_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).with_name("blueprint_config.json")

GRID_PITCH_OPTIONS = (10.0, 20.0, 30.0, 40.0)
THICKNESS_OPTIONS = (("Thin", 2.0), ("Medium", 4.0), ("Thick", 6.0))
GRID_COLOR_OPTIONS = (("Light", "#e5e7eb"), ("Medium", "#9ca3af"), ("Dark", "#4b5563"))

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


class EditorConfig(BaseModel):
    grid_pitch: float = Field(20.0, gt=0.0, allow_inf_nan=False, description="Grid spacing; half of it is the snap threshold.")
    thickness: float = Field(4.0, gt=0.0, allow_inf_nan=False, description="Display thickness applied to newly drawn walls.")
    grid_color: str = Field("#e5e7eb", description="Colour of the background grid lines.")
    canvas_width: float = Field(800.0, gt=0.0, allow_inf_nan=False, description="Drawing surface width; rulers span it.")
    canvas_height: float = Field(600.0, gt=0.0, allow_inf_nan=False, description="Drawing surface height; rulers span it.")

    @field_validator("grid_color")
    @classmethod
    def _check_color(cls, value: str) -> str:
        if not _HEX_COLOR.match(value):
            raise ValueError(f"grid_color must look like '#rrggbb', got '{value}'")
        return value.lower()

    def bounds(self) -> tuple[float, float]:
        return (self.canvas_width, self.canvas_height)

    def updated(self, **changes: Any) -> "EditorConfig":
        """Return a validated copy with ``changes`` applied."""
        data = self.model_dump()
        data.update({key: value for key, value in changes.items() if value is not None})
        return EditorConfig(**data)


def _config_path(path: Optional[os.PathLike | str]) -> Path:
    if path is not None:
        return Path(path)
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_PATH


def load_config(path: Optional[os.PathLike | str] = None) -> EditorConfig:
    """Load editor settings from JSON, falling back to defaults when absent."""
    config_path = _config_path(path)
    if not config_path.exists():
        return EditorConfig()
    with config_path.open("r", encoding="utf-8") as handle:
        data: Dict[str, Any] = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a JSON object")
    logger.debug("loaded editor config from {}", config_path)
    return EditorConfig(**data)


__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "GRID_PITCH_OPTIONS",
    "THICKNESS_OPTIONS",
    "GRID_COLOR_OPTIONS",
    "EditorConfig",
    "load_config",
]
