"""
Per-notation parsers. Each takes a lowercased, trimmed token and returns a
ColorSample, or None when the token does not fit its notation.

Channels are left unclamped; the pipeline clamps red/green/blue afterwards.
A numeric group that float() rejects (e.g. ``1.2.3``) raises ValueError,
which the pipeline treats like any other unrecognized token.
Numbers are ASCII digits only; other Unicode digits leave the token unparsed.
"""

import re
from typing import Callable, Dict, Optional

from .colorspace import hsl_to_rgb, oklch_to_rgb
from .models import ColorNotation, ColorSample, Oklch
from .numbers import pct

# HEX -------------------------------------------------------------

def parse_hex(s: str) -> Optional[ColorSample]:
    """Parse #rgb, #rgba, #rrggbb or #rrggbbaa."""
    h = s.lstrip("#")
    if len(h) in (3, 4):
        h = "".join(ch * 2 for ch in h)
    if len(h) not in (6, 8):
        return None

    r = int(h[0:2], 16)
    g = int(h[2:4], 16)
    b = int(h[4:6], 16)
    if len(h) == 8:
        return ColorSample(red=r, green=g, blue=b, alpha=int(h[6:8], 16) / 255)
    return ColorSample(red=r, green=g, blue=b)

# Alpha ----------------------------------------------------------

def parse_alpha(a: Optional[str]) -> Optional[float]:
    """Alpha as written: '50%' is 0.5, a bare number is taken as-is."""
    if a is None:
        return None
    return pct(a) if a.endswith("%") else float(a)

# RGB -------------------------------------------------------------

RGB_RE = re.compile(
    r"rgba?\((-?[0-9]+)[,\s]+(-?[0-9]+)[,\s]+(-?[0-9]+)(?:\s*[,/]\s*([0-9.]+%?))?\)"
)

def parse_rgb(s: str) -> Optional[ColorSample]:
    """Parse rgb()/rgba() with comma or space separators."""
    m = RGB_RE.search(s)
    if not m:
        return None
    R, G, B, A = m.groups()
    return ColorSample(red=int(R), green=int(G), blue=int(B), alpha=parse_alpha(A))

# HSL -------------------------------------------------------------

HSL_RE = re.compile(
    r"hsla?\(([0-9]+)(?:deg)?[,?\s]+([0-9.]+)%?[,\s]+([0-9.]+)%?(?:\s*[,/]\s*([0-9.]+%?))?\)"
)

def parse_hsl(s: str) -> Optional[ColorSample]:
    """Parse hsl()/hsla(). Hue is an integer in degrees."""
    m = HSL_RE.search(s)
    if not m:
        return None
    h_val, s_val, l_val, a_val = m.groups()
    r, g, b = hsl_to_rgb(int(h_val), float(s_val) / 100, float(l_val) / 100)
    return ColorSample(red=r, green=g, blue=b, alpha=parse_alpha(a_val))

# OKLCH -----------------------------------------------------------

OKLCH_RE = re.compile(
    r"oklch\(\s*([0-9.]+)%?\s+([0-9.]+)\s+([0-9.]+)(?:deg)?(?:\s*/\s*([0-9.]+%?))?\s*\)"
)

def parse_oklch(s: str) -> Optional[ColorSample]:
    """Parse oklch(L% C h [/ a]). Lightness is always read as a percentage."""
    m = OKLCH_RE.search(s)
    if not m:
        return None
    L_val, C_val, h_val, a_val = m.groups()
    lch = Oklch(
        lightness=float(L_val) / 100,
        chroma=float(C_val),
        hue=float(h_val),
        alpha=parse_alpha(a_val),
    )
    r, g, b = oklch_to_rgb(lch)
    return ColorSample(red=r, green=g, blue=b, alpha=lch.alpha)


PARSERS: Dict[ColorNotation, Callable[[str], Optional[ColorSample]]] = {
    ColorNotation.HEX: parse_hex,
    ColorNotation.RGB: parse_rgb,
    ColorNotation.HSL: parse_hsl,
    ColorNotation.OKLCH: parse_oklch,
}
