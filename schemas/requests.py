from pydantic import BaseModel, Field
from typing import Literal

ColorFormat = Literal["oklch", "hex", "rgb", "hsl"]

class ColorConvertRequest(BaseModel):
    code: str = Field(..., description="The CSS color code to convert")
    target: ColorFormat = Field(..., description="The target color code format to convert to")
    use_css_syntax: bool = Field(True, description="Wrap the result in CSS function syntax; otherwise emit bare components")

class CssConvertRequest(BaseModel):
    css: str = Field(..., description="CSS source whose color literals should be converted")
    output_format: ColorFormat = Field("oklch", description="The color format every literal is converted to")
    use_css_syntax: bool = Field(True, description="Wrap results in CSS function syntax; otherwise emit bare components")

class ExtractColorsRequest(BaseModel):
    css: str = Field(..., description="CSS source to scan for color literals")
