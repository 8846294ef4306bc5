"""
Value types shared by the tokenizer, parsers, color-space math and formatters.
"""

import math
from enum import Enum
from typing import NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field


class ColorNotation(str, Enum):
    """The four color notations recognized in CSS text, also the output formats."""

    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    OKLCH = "oklch"


def clamp(v: float, lo: float, hi: float) -> float:
    """Clamp value between lo and hi."""
    return max(lo, min(hi, v))


class ColorSample(BaseModel):
    """sRGB color parsed from one token. Channels may exceed [0, 255] until clamped."""

    model_config = ConfigDict(frozen=True)

    red: float
    green: float
    blue: float
    alpha: Optional[float] = None

    def clamped(self) -> "ColorSample":
        channels = (self.red, self.green, self.blue)
        if not all(math.isfinite(c) for c in channels):
            raise ValueError(f"non-finite channel in {channels}")
        return ColorSample(
            red=clamp(self.red, 0, 255),
            green=clamp(self.green, 0, 255),
            blue=clamp(self.blue, 0, 255),
            alpha=self.alpha,
        )

    @property
    def is_translucent(self) -> bool:
        return self.alpha is not None and self.alpha < 1


class Oklab(NamedTuple):
    lightness: float
    a: float
    b: float


class Oklch(NamedTuple):
    lightness: float
    chroma: float
    hue: float
    alpha: Optional[float] = None


class ConversionConfig(BaseModel):
    """
    Per-call conversion settings.

    output_format is a plain string; a name outside ColorNotation leaves
    every token untouched.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    output_format: str = Field("oklch", alias="outputFormat")
    use_css_syntax: bool = Field(True, alias="useCssFunctionalSyntax")
