from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from nexacms.sections.props import HEX_COLOR


def _color():
    return Field(None, pattern=HEX_COLOR)


class SiteConfigUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    site_name: Optional[str] = Field(None, min_length=1, max_length=200)
    site_description: Optional[str] = None
    logo_url: Optional[str] = Field(None, max_length=512)
    primary_color: Optional[str] = _color()
    secondary_color: Optional[str] = _color()
    accent_color: Optional[str] = _color()
    background_color: Optional[str] = _color()
    text_color: Optional[str] = _color()
    border_color: Optional[str] = _color()
    theme: Optional[Literal["LIGHT", "DARK", "AUTO"]] = None
    language: Optional[str] = Field(None, min_length=2, max_length=10)
    direction: Optional[Literal["LTR", "RTL"]] = None
