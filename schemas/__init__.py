from .requests import ColorConvertRequest, CssConvertRequest, ExtractColorsRequest
from .responses import (
    SuccessResponse,
    ColorPair,
    CssConvertResponse,
    ColorMatch,
    ExtractColorsResponse,
)

__all__ = [
    "ColorConvertRequest",
    "CssConvertRequest",
    "ExtractColorsRequest",
    "SuccessResponse",
    "ColorPair",
    "CssConvertResponse",
    "ColorMatch",
    "ExtractColorsResponse",
]
