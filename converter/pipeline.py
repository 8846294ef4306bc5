"""
Scan-and-substitute conversion of every color literal in a CSS string.

Tokens are replaced in one pass over the original text. A token that cannot
be parsed, or that fails during conversion, is written back unchanged, so a
call never raises for malformed input.
"""

import logging
from typing import List, NamedTuple, Optional

from .formatters import FORMATTERS
from .models import ColorNotation, ConversionConfig
from .parsers import PARSERS
from .tokenizer import COLOR_RE, ColorToken, iter_color_tokens, match_color, token_from_match

logger = logging.getLogger(__name__)


class Replacement(NamedTuple):
    token: ColorToken
    replacement: str


def _output_notation(config: ConversionConfig) -> Optional[ColorNotation]:
    try:
        return ColorNotation(config.output_format)
    except ValueError:
        logger.debug(f"Unsupported output format {config.output_format!r}, colors left as-is")
        return None


def _try_convert(token: ColorToken, target: ColorNotation, use_css_syntax: bool) -> Optional[str]:
    try:
        sample = PARSERS[token.notation](token.text.lower().strip())
        if sample is None:
            logger.debug(f"Unrecognized {token.notation.value} color: {token.text!r}")
            return None
        return FORMATTERS[target](sample.clamped(), use_css_syntax)
    except (ValueError, ArithmeticError) as e:
        logger.warning(f"Failed to convert color {token.text!r}: {e}")
        return None


def _convert(token: ColorToken, target: Optional[ColorNotation], use_css_syntax: bool) -> str:
    if target is None:
        return token.text
    converted = _try_convert(token, target, use_css_syntax)
    return token.text if converted is None else converted


def convert_token(token: ColorToken, config: ConversionConfig) -> str:
    """Replacement text for one token; the token's own text on any failure."""
    return _convert(token, _output_notation(config), config.use_css_syntax)


def convert_css_colors(css: str, config: ConversionConfig) -> str:
    """Convert every color literal in css to config.output_format."""
    if not css:
        return ""
    target = _output_notation(config)
    return COLOR_RE.sub(
        lambda m: _convert(token_from_match(m), target, config.use_css_syntax),
        css,
    )


def collect_replacements(css: str, config: ConversionConfig) -> List[Replacement]:
    """
    The (token, replacement) pairs of one conversion, in document order.

    These are the index-aligned before/after colors a preview needs, without
    re-scanning the output text.
    """
    target = _output_notation(config)
    return [
        Replacement(token, _convert(token, target, config.use_css_syntax))
        for token in iter_color_tokens(css)
    ]


def apply_replacements(css: str, replacements: List[Replacement]) -> str:
    """Rebuild css with each token span swapped for its replacement."""
    parts = []
    pos = 0
    for r in replacements:
        parts.append(css[pos:r.token.start])
        parts.append(r.replacement)
        pos = r.token.end
    parts.append(css[pos:])
    return "".join(parts)


def convert_color(code: str, config: ConversionConfig) -> Optional[str]:
    """
    Convert one standalone color code.

    Returns None when code is not a single color in a supported notation, or
    when it does not parse. Unsupported output formats return the code as-is.
    """
    token = match_color(code)
    if token is None:
        return None
    target = _output_notation(config)
    if target is None:
        return token.text
    return _try_convert(token, target, config.use_css_syntax)
