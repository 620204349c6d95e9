"""
Configuration management for termframe.

Settings file (JSON):
    {
        "background": "#000000",
        "foreground": "#FFFFFF",
        "title": null,
        "border": {
            "visible": true,
            "padding": 1,
            "width": 2,
            "type": "double",
            "colors": ["#FF0BB0", "#6366F1"],
            "border_char": null,
            "vertical_chars": [],
            "horizontal_chars": [],
            "corner_chars": {"top_left": ["╭"]}
        }
    }
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .border import BorderBuilder, BorderType, ConfigurationError, Corner

logger = logging.getLogger(__name__)


@dataclass
class BorderSettings:
    """Border options as stored in the settings file."""
    visible: bool = True
    padding: int = 1
    width: int = 1
    border_type: str = BorderType.SOLID.value
    colors: list[str] = field(default_factory=list)
    border_char: Optional[str] = None
    vertical_chars: list[str] = field(default_factory=list)
    horizontal_chars: list[str] = field(default_factory=list)
    corner_chars: dict[str, list[str]] = field(default_factory=dict)

    def to_dict(self) -> dict:
        d = {
            "visible": self.visible,
            "padding": self.padding,
            "width": self.width,
            "type": self.border_type,
            "colors": list(self.colors),
        }
        if self.border_char:
            d["border_char"] = self.border_char
        if self.vertical_chars:
            d["vertical_chars"] = list(self.vertical_chars)
        if self.horizontal_chars:
            d["horizontal_chars"] = list(self.horizontal_chars)
        if self.corner_chars:
            d["corner_chars"] = {k: list(v) for k, v in self.corner_chars.items()}
        return d

    @classmethod
    def from_dict(cls, data: dict) -> "BorderSettings":
        return cls(
            visible=data.get("visible", True),
            padding=data.get("padding", 1),
            width=data.get("width", 1),
            border_type=data.get("type", BorderType.SOLID.value),
            colors=list(data.get("colors", [])),
            border_char=data.get("border_char"),
            vertical_chars=list(data.get("vertical_chars", [])),
            horizontal_chars=list(data.get("horizontal_chars", [])),
            corner_chars={k: list(v) for k, v in data.get("corner_chars", {}).items()},
        )

    def to_builder(self) -> BorderBuilder:
        """
        Turn these settings into a builder.

        Raises:
            ConfigurationError: Unknown border type or corner name, bad glyphs,
                or more colors than layers
        """
        builder = (
            BorderBuilder()
            .visible(self.visible)
            .padding(self.padding)
            .width(self.width)
            .border_type(BorderType.from_name(self.border_type))
        )
        if self.colors:
            builder.with_colors(self.colors)
        if self.vertical_chars:
            builder.vertical_border_char(self.vertical_chars)
        if self.horizontal_chars:
            builder.horizontal_border_char(self.horizontal_chars)
        for name, chars in self.corner_chars.items():
            try:
                corner = Corner(name)
            except ValueError:
                raise ConfigurationError(f"unknown corner {name!r}")
            builder.corner_char(corner, chars)
        if self.border_char:
            builder.border_char(self.border_char)
        return builder


@dataclass
class FrameSettings:
    """Everything the frame program reads from its settings file."""
    background: str = "#000000"
    foreground: str = "#FFFFFF"
    title: Optional[str] = None
    border: BorderSettings = field(default_factory=BorderSettings)

    def to_dict(self) -> dict:
        d = {
            "background": self.background,
            "foreground": self.foreground,
            "border": self.border.to_dict(),
        }
        if self.title:
            d["title"] = self.title
        return d

    @classmethod
    def from_dict(cls, data: dict) -> "FrameSettings":
        return cls(
            background=data.get("background", "#000000"),
            foreground=data.get("foreground", "#FFFFFF"),
            title=data.get("title"),
            border=BorderSettings.from_dict(data.get("border", {})),
        )

    @classmethod
    def load(cls, path: Path) -> "FrameSettings":
        """Load settings from file, falling back to defaults if it is missing or unreadable."""
        if not path.exists():
            return cls()
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not load settings from %s: %s", path, e)
            return cls()
        if not isinstance(data, dict):
            logger.warning("Ignoring settings in %s: expected a JSON object", path)
            return cls()
        return cls.from_dict(data)

    def save(self, path: Path):
        """Save settings to file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)
