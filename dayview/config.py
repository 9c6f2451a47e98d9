"""Grid resolution settings for the day view."""

import os

import pydantic
from dotenv import load_dotenv

from .time_utils import MINUTES_PER_STEP, PIXELS_PER_STEP, WINDOW_PADDING_MINUTES


class GridSettings(pydantic.BaseModel):
    minutes_per_step: int = MINUTES_PER_STEP
    pixels_per_step: int = PIXELS_PER_STEP
    window_padding_minutes: int = WINDOW_PADDING_MINUTES

    @pydantic.field_validator('minutes_per_step', 'pixels_per_step')
    @classmethod
    def validate_step(cls, v: int) -> int:
        if v <= 0:
            raise ValueError('step sizes must be greater than 0')
        return v

    @pydantic.field_validator('window_padding_minutes')
    @classmethod
    def validate_padding(cls, v: int) -> int:
        if v < 0:
            raise ValueError('window_padding_minutes cannot be negative')
        return v

    def minutes_to_px(self, minutes: float) -> float:
        return (minutes / self.minutes_per_step) * self.pixels_per_step


DEFAULT_GRID = GridSettings()


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name, str(default)).strip()
    try:
        return int(raw)
    except ValueError:
        return default


def load_grid_settings() -> GridSettings:
    """
    Build grid settings from DAYVIEW_* environment variables.

    A .env file in the working directory is loaded first. Missing or
    unparsable values fall back to the module defaults; values that parse
    but are out of range raise ValueError.
    """
    load_dotenv()
    return GridSettings(
        minutes_per_step=_get_int('DAYVIEW_MINUTES_PER_STEP', MINUTES_PER_STEP),
        pixels_per_step=_get_int('DAYVIEW_PIXELS_PER_STEP', PIXELS_PER_STEP),
        window_padding_minutes=_get_int('DAYVIEW_WINDOW_PADDING_MINUTES', WINDOW_PADDING_MINUTES),
    )
