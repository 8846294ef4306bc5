from pydantic import BaseModel, Field
from typing import List, Optional

class SuccessResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None

class ColorPair(BaseModel):
    original: str = Field(..., description="The color literal as written in the input")
    converted: str = Field(..., description="The text that replaced it in the output")
    start: int
    end: int

class CssConvertResponse(BaseModel):
    success: bool = True
    css: str
    colors: List[ColorPair] = []

class ColorMatch(BaseModel):
    text: str
    notation: str
    start: int
    end: int

class ExtractColorsResponse(BaseModel):
    success: bool = True
    colors: List[ColorMatch] = []
