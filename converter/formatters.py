"""
Formatters from a clamped ColorSample to text in each output notation.

use_css_syntax picks between function syntax (``rgb(1, 2, 3)``) and the bare
component list used in custom-property shorthand (``1 2 3``).
"""

import re
from typing import Callable, Dict

from .colorspace import rgb_to_hsl, rgb_to_oklch
from .models import ColorNotation, ColorSample
from .numbers import js_number, js_round, to_fixed


def _hex_byte(c: float) -> str:
    return format(js_round(c), "02x")


def _short_alpha(a: float) -> str:
    """Alpha with up to two decimals, as rgb() and hsl() print it."""
    return js_number(float(to_fixed(a, 2)))


def format_hex(sample: ColorSample, use_css_syntax: bool) -> str:
    h = _hex_byte(sample.red) + _hex_byte(sample.green) + _hex_byte(sample.blue)
    if sample.is_translucent:
        h += _hex_byte(sample.alpha * 255)
    return ("#" if use_css_syntax else "") + h


def format_rgb(sample: ColorSample, use_css_syntax: bool) -> str:
    r, g, b = js_round(sample.red), js_round(sample.green), js_round(sample.blue)
    if sample.is_translucent:
        a = _short_alpha(sample.alpha)
        return f"rgba({r}, {g}, {b}, {a})" if use_css_syntax else f"{r} {g} {b} / {a}"
    return f"rgb({r}, {g}, {b})" if use_css_syntax else f"{r} {g} {b}"


def format_hsl(sample: ColorSample, use_css_syntax: bool) -> str:
    hue, sat, light = rgb_to_hsl(sample)
    h = to_fixed(hue, 0)
    s = re.sub(r"\.0$", "", to_fixed(sat, 1))
    l = re.sub(r"\.0$", "", to_fixed(light, 1))
    if sample.is_translucent:
        a = _short_alpha(sample.alpha)
        return f"hsla({h}, {s}%, {l}%, {a})" if use_css_syntax else f"{h} {s} {l} / {a}"
    return f"hsl({h}, {s}%, {l}%)" if use_css_syntax else f"{h} {s} {l}"


def format_oklch(sample: ColorSample, use_css_syntax: bool) -> str:
    """
    Lightness and hue keep two decimals unless they are exactly ``.00``;
    chroma keeps up to four with trailing zeros dropped. A translucent alpha
    is appended as `` / .5`` style text.
    """
    lch = rgb_to_oklch(sample)
    l = re.sub(r"\.00$", "", to_fixed(lch.lightness * 100, 2))
    c = re.sub(r"(\.\d*?)0+$", r"\1", to_fixed(lch.chroma, 4), count=1)
    c = re.sub(r"\.$", "", c)
    h = re.sub(r"\.00$", "", to_fixed(lch.hue, 2))

    alpha_part = ""
    if lch.alpha is not None and lch.alpha < 1:
        a = re.sub(r"0+$", "", to_fixed(lch.alpha, 2), count=1)
        a = re.sub(r"\.$", "", a)
        a = re.sub(r"^0\.", ".", a)
        alpha_part = f" / {a}"

    if use_css_syntax:
        return f"oklch({l}% {c} {h}{alpha_part})"
    return f"{l} {c} {h}{alpha_part}"


FORMATTERS: Dict[ColorNotation, Callable[[ColorSample, bool], str]] = {
    ColorNotation.HEX: format_hex,
    ColorNotation.RGB: format_rgb,
    ColorNotation.HSL: format_hsl,
    ColorNotation.OKLCH: format_oklch,
}
