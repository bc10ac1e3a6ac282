"""
Dialog configuration models.

Configuration is data-only and validated with Pydantic:
- Automatic validation (positive sizes, palette-range colours)
- Validation on assignment, so colour setters reject bad indices
- JSON loading for per-game tuning

Volume and Speed are tags; their magnitudes live in explicit tables so
the tag and the number can change independently.
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_serializer, field_validator

logger = logging.getLogger(__name__)


class Volume(Enum):
    """Tick sound loudness."""
    QUIET = auto()
    NORMAL = auto()
    LOUD = auto()


class Speed(Enum):
    """Reveal speed."""
    SLOW = auto()
    NORMAL = auto()
    FAST = auto()


# Volume level on a 0-255 scale
VOLUME_LEVELS: dict[Volume, int] = {
    Volume.QUIET: 20,
    Volume.NORMAL: 100,
    Volume.LOUD: 200,
}

MAX_VOLUME_LEVEL = 255

# Milliseconds per revealed character
SPEED_INTERVALS_MS: dict[Speed, int] = {
    Speed.SLOW: 200,
    Speed.NORMAL: 100,
    Speed.FAST: 50,
}


def volume_level(volume: Volume | int) -> int:
    """Resolve a Volume tag (or a raw 0-255 level) to a level."""
    if isinstance(volume, Volume):
        return VOLUME_LEVELS[volume]
    return max(0, min(MAX_VOLUME_LEVEL, int(volume)))


def level_to_gain(level: int) -> float:
    """Convert a 0-255 level to the mixer's 0.0-1.0 gain."""
    return max(0, min(MAX_VOLUME_LEVEL, level)) / MAX_VOLUME_LEVEL


class _ConfigModel(BaseModel):
    model_config = ConfigDict(
        validate_assignment=True,
        extra='forbid',
    )


class WrapConfig(_ConfigModel):
    """Word-wrap limits of the bubble."""
    max_chars_per_line: PositiveInt = 26
    max_lines: PositiveInt = 3


class BubbleConfig(_ConfigModel):
    """Bubble geometry and palette colours."""
    width: PositiveInt = 160
    height: PositiveInt = 60
    margin_left: int = Field(default=4, ge=0)
    margin_top: int = Field(default=4, ge=0)
    line_height: PositiveInt = 16
    font_size: PositiveInt = 12
    background_color: int = Field(default=0, ge=0, le=15)
    bubble_color: int = Field(default=1, ge=0, le=15)
    letter_color: int = Field(default=15, ge=0, le=15)


class DialogConfig(_ConfigModel):
    """Complete per-controller configuration."""
    speed: Speed = Speed.NORMAL
    sound_enabled: bool = True
    wrap: WrapConfig = Field(default_factory=WrapConfig)
    bubble: BubbleConfig = Field(default_factory=BubbleConfig)

    @field_validator("speed", mode="before")
    @classmethod
    def parse_speed_name(cls, value):
        if isinstance(value, str):
            try:
                return Speed[value.upper()]
            except KeyError:
                raise ValueError(f"Unknown speed {value!r}") from None
        return value

    @field_serializer("speed")
    def serialize_speed_name(self, speed: Speed) -> str:
        return speed.name

    @property
    def interval_ms(self) -> int:
        return SPEED_INTERVALS_MS[self.speed]

    @classmethod
    def from_json_file(cls, path: str | Path) -> DialogConfig:
        """
        Load configuration from a JSON file.

        Speed is given by name, e.g. {"speed": "FAST"}.

        Raises:
            FileNotFoundError: If the file does not exist
            pydantic.ValidationError: If the content is invalid
        """
        path = Path(path)
        config = cls.model_validate_json(path.read_text(encoding="utf-8"))
        logger.info(f"Loaded dialog config from {path}")
        return config

    def clone(self) -> DialogConfig:
        """Deep copy, so per-controller changes never leak."""
        return self.model_copy(deep=True)
