from .models import ColorNotation, ColorSample, ConversionConfig, Oklab, Oklch
from .tokenizer import COLOR_RE, ColorToken, iter_color_tokens, match_color
from .pipeline import (
    Replacement,
    apply_replacements,
    collect_replacements,
    convert_color,
    convert_css_colors,
    convert_token,
)

__all__ = [
    "ColorNotation",
    "ColorSample",
    "ConversionConfig",
    "Oklab",
    "Oklch",
    "COLOR_RE",
    "ColorToken",
    "iter_color_tokens",
    "match_color",
    "Replacement",
    "apply_replacements",
    "collect_replacements",
    "convert_color",
    "convert_css_colors",
    "convert_token",
]
