"""
CSS color conversion endpoints.
Converts every hex, rgb()/rgba(), hsl()/hsla() and oklch() literal in a CSS
document to one target notation, leaving all other text untouched.
"""

import logging

from fastapi import HTTPException, APIRouter

from converter import (
    ConversionConfig,
    apply_replacements,
    collect_replacements,
    convert_color,
    iter_color_tokens,
)
from schemas.requests import (
    ColorConvertRequest,
    CssConvertRequest,
    ExtractColorsRequest,
)
from schemas.responses import (
    ColorMatch,
    ColorPair,
    CssConvertResponse,
    ExtractColorsResponse,
    SuccessResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/convert_css", response_model=CssConvertResponse, operation_id="convert_css", description="Convert every color literal in a CSS document to a target format")
async def convert_css(request: CssConvertRequest):
    """Convert all color literals; malformed ones are returned unchanged."""
    config = ConversionConfig(output_format=request.output_format, use_css_syntax=request.use_css_syntax)
    replacements = collect_replacements(request.css, config)
    pairs = [
        ColorPair(original=r.token.text, converted=r.replacement, start=r.token.start, end=r.token.end)
        for r in replacements
    ]
    logger.info(f"Converted {len(pairs)} color literals to {request.output_format}")
    return CssConvertResponse(success=True, css=apply_replacements(request.css, replacements), colors=pairs)

@router.post("/convert_color_code", response_model=SuccessResponse, operation_id="convert_color_code", description="Convert a CSS color code to a target format")
async def parse_and_convert(request: ColorConvertRequest):
    """Parse a single CSS color and convert it to the target format."""
    config = ConversionConfig(output_format=request.target, use_css_syntax=request.use_css_syntax)
    converted = convert_color(request.code, config)
    if converted is None:
        raise HTTPException(status_code=400, detail="Invalid or unsupported CSS color")
    return SuccessResponse(success=True, message=converted)

@router.post("/extract_colors", response_model=ExtractColorsResponse, operation_id="extract_colors", description="List the color literals found in a CSS document")
async def extract_colors(request: ExtractColorsRequest):
    """List color literals in document order, with their notation and span."""
    colors = [
        ColorMatch(text=t.text, notation=t.notation.value, start=t.start, end=t.end)
        for t in iter_color_tokens(request.css)
    ]
    return ExtractColorsResponse(success=True, colors=colors)
