"""
Finds color literals in CSS text.

Each alternative of COLOR_RE is a named group, so a match carries its notation
tag in ``match.lastgroup``. ``finditer`` keeps its position per call, which
makes the module-level pattern safe to share between concurrent scans.
"""

import re
from typing import Iterator, List, NamedTuple, Optional

from .models import ColorNotation

COLOR_RE = re.compile(
    r"(?P<hsl>hsla?\([^)]+\))"
    r"|(?P<rgb>rgba?\([^)]+\))"
    r"|(?P<hex>#[0-9a-f]{3,8})"
    r"|(?P<oklch>oklch\([^)]+\))",
    re.IGNORECASE,
)


class ColorToken(NamedTuple):
    start: int
    end: int
    text: str
    notation: ColorNotation


def token_from_match(m: "re.Match[str]") -> ColorToken:
    return ColorToken(m.start(), m.end(), m.group(0), ColorNotation(m.lastgroup))


def iter_color_tokens(text: str) -> Iterator[ColorToken]:
    """Yield color tokens in document order. Spans never overlap."""
    for m in COLOR_RE.finditer(text):
        yield token_from_match(m)


def extract_colors(text: str) -> List[str]:
    """Matched color strings, verbatim, in document order."""
    return [m.group(0) for m in COLOR_RE.finditer(text)]


def match_color(code: str) -> Optional[ColorToken]:
    """Recognize a single standalone color code, ignoring surrounding whitespace."""
    s = code.strip()
    m = COLOR_RE.fullmatch(s)
    if not m:
        return None
    return token_from_match(m)
