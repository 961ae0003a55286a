from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
import tomllib
from typing import Any, Mapping

from .color import BLACK, RGB, to_rgb
from .errors import CanvasConfigError

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CanvasSettings:
    width: int
    height: int
    background: RGB = BLACK

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> CanvasSettings:
        try:
            width = raw["width"]
            height = raw["height"]
        except KeyError as exc:
            raise CanvasConfigError(f"canvas settings missing required field: {exc.args[0]}") from exc
        width = _coerce_size(width, "width")
        height = _coerce_size(height, "height")
        background = _coerce_color(raw.get("background"), "background")
        unknown = sorted(set(raw) - {"width", "height", "background"})
        if unknown:
            raise CanvasConfigError(f"unknown canvas settings: {', '.join(unknown)}")
        return cls(width=width, height=height, background=background)


def load_canvas_settings(path: str | Path) -> CanvasSettings:
    """Read canvas settings from a TOML file.

    Values come from the ``[canvas]`` table when present, otherwise from the
    top level of the document.
    """
    settings_path = Path(path)
    if not settings_path.exists():
        raise FileNotFoundError(f"canvas settings not found: {settings_path}")
    with settings_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise CanvasConfigError(f"invalid TOML in {settings_path}: {exc}") from exc
    table = raw.get("canvas", raw)
    if not isinstance(table, dict):
        raise CanvasConfigError("`canvas` must be a table")
    settings = CanvasSettings.from_mapping(table)
    LOGGER.debug("loaded canvas settings from %s: %s", settings_path, settings)
    return settings


def _coerce_size(value: object, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise CanvasConfigError(f"`{field_name}` must be an integer")
    if value < 0:
        raise CanvasConfigError(f"`{field_name}` must be >= 0")
    return value


def _coerce_color(value: object, field_name: str) -> RGB:
    if value is None:
        return BLACK
    if not isinstance(value, (list, tuple)) or len(value) not in (3, 4):
        raise CanvasConfigError(f"`{field_name}` must be a list of 3 or 4 integers")
    try:
        return to_rgb(list(value))
    except (TypeError, ValueError) as exc:
        raise CanvasConfigError(f"`{field_name}` is not a valid color: {exc}") from exc
