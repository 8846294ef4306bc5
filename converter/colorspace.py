"""
Color-space math between sRGB bytes, HSL and Oklab/Oklch.

Matrix constants and evaluation order are fixed; changing either shifts the
printed digits.
"""

import math
from typing import Tuple

from .models import ColorSample, Oklab, Oklch, clamp
from .numbers import js_round

# sRGB companding ------------------------------------------------

def srgb_to_linear(c: float) -> float:
    """sRGB byte to linear light."""
    v = c / 255
    return v / 12.92 if v <= 0.04045 else ((v + 0.055) / 1.055) ** 2.4

def linear_to_srgb(c: float) -> int:
    """Linear light to sRGB byte. Clamping happens on the linear value."""
    if math.isnan(c):
        raise ValueError("linear channel is NaN")
    v = clamp(c, 0, 1)
    s = 12.92 * v if v <= 0.0031308 else 1.055 * math.pow(v, 1 / 2.4) - 0.055
    return js_round(s * 255)

# HSL ------------------------------------------------------------

def hsl_to_rgb(h: int, s: float, l: float) -> Tuple[int, int, int]:
    """Convert HSL to RGB. h in deg, s,l in [0,1]. A hue outside [0, 360) gives grey."""
    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2

    if 0 <= h < 60:
        r1, g1, b1 = c, x, 0
    elif 60 <= h < 120:
        r1, g1, b1 = x, c, 0
    elif 120 <= h < 180:
        r1, g1, b1 = 0, c, x
    elif 180 <= h < 240:
        r1, g1, b1 = 0, x, c
    elif 240 <= h < 300:
        r1, g1, b1 = x, 0, c
    elif 300 <= h < 360:
        r1, g1, b1 = c, 0, x
    else:
        r1, g1, b1 = 0, 0, 0

    return (
        js_round((r1 + m) * 255),
        js_round((g1 + m) * 255),
        js_round((b1 + m) * 255),
    )

def rgb_to_hsl(sample: ColorSample) -> Tuple[float, float, float]:
    """Convert RGB to HSL. Returns hue in degrees, saturation and lightness in percent."""
    r, g, b = sample.red / 255, sample.green / 255, sample.blue / 255
    max_val = max(r, g, b)
    min_val = min(r, g, b)
    h = 0.0
    s = 0.0
    l = (max_val + min_val) / 2

    if max_val != min_val:
        d = max_val - min_val
        s = d / (2 - max_val - min_val) if l > 0.5 else d / (max_val + min_val)
        if max_val == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif max_val == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6

    return h * 360, s * 100, l * 100

# OKLCH -> sRGB --------------------------------------------------

def oklch_to_oklab(lch: Oklch) -> Oklab:
    rad = lch.hue * (math.pi / 180)
    return Oklab(lch.lightness, lch.chroma * math.cos(rad), lch.chroma * math.sin(rad))

def oklab_to_linear_rgb(lab: Oklab) -> Tuple[float, float, float]:
    """OKLab -> non-linear LMS -> linear LMS -> linear sRGB, unclamped."""
    l_ = lab.lightness + 0.3963377774 * lab.a + 0.2158037573 * lab.b
    m_ = lab.lightness - 0.1055613458 * lab.a - 0.0638541728 * lab.b
    s_ = lab.lightness - 0.0894841775 * lab.a - 1.2914855480 * lab.b

    l = l_ * l_ * l_
    m = m_ * m_ * m_
    s = s_ * s_ * s_

    R = 4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s
    G = -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s
    B = -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s

    return R, G, B

def oklab_to_rgb(lab: Oklab) -> Tuple[int, int, int]:
    """Convert OKLab to RGB."""
    R, G, B = oklab_to_linear_rgb(lab)
    return linear_to_srgb(R), linear_to_srgb(G), linear_to_srgb(B)

def oklch_to_rgb(lch: Oklch) -> Tuple[int, int, int]:
    return oklab_to_rgb(oklch_to_oklab(lch))

# sRGB -> OKLCH --------------------------------------------------

def linear_rgb_to_xyz(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Linear sRGB (D65) to XYZ."""
    x = r * 0.4124564 + g * 0.3575761 + b * 0.1804375
    y = r * 0.2126729 + g * 0.7151522 + b * 0.0721750
    z = r * 0.0193339 + g * 0.1191920 + b * 0.9503041
    return x, y, z

def xyz_to_oklab(x: float, y: float, z: float) -> Oklab:
    l = 0.4122214708 * x + 0.5363325363 * y + 0.0514459929 * z
    m = 0.2119034982 * x + 0.6806995451 * y + 0.1073969566 * z
    s = 0.0883024619 * x + 0.2817188376 * y + 0.6299787005 * z

    l_ = math.cbrt(l)
    m_ = math.cbrt(m)
    s_ = math.cbrt(s)

    return Oklab(
        0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_,
        1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_,
        0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_,
    )

def oklab_to_oklch(lab: Oklab) -> Oklch:
    C = math.sqrt(lab.a * lab.a + lab.b * lab.b)
    h = math.atan2(lab.b, lab.a) * (180 / math.pi)
    if h < 0:
        h += 360
    return Oklch(lab.lightness, C, h)

def rgb_to_oklch(sample: ColorSample) -> Oklch:
    """Convert an sRGB sample to OKLCH, carrying alpha through unchanged."""
    xyz = linear_rgb_to_xyz(
        srgb_to_linear(sample.red),
        srgb_to_linear(sample.green),
        srgb_to_linear(sample.blue),
    )
    return oklab_to_oklch(xyz_to_oklab(*xyz))._replace(alpha=sample.alpha)
