from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

MenuLocation = Literal[
    "HEADER_PRIMARY",
    "HEADER_SECONDARY",
    "FOOTER_PRIMARY",
    "FOOTER_SECONDARY",
    "SIDEBAR",
]
LinkTarget = Literal["SELF", "BLANK"]


class MenuCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=100)
    location: MenuLocation
    is_active: bool = True


class MenuUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    location: Optional[MenuLocation] = None
    is_active: Optional[bool] = None


class ItemCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=100)
    url: Optional[str] = Field(None, max_length=500)
    page_id: Optional[str] = None
    parent_id: Optional[str] = None
    target: LinkTarget = "SELF"
    order: Optional[int] = Field(None, ge=0)
    is_visible: bool = True
    css_class: Optional[str] = Field(None, max_length=200)
    icon: Optional[str] = Field(None, max_length=100)


class ItemUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: Optional[str] = Field(None, min_length=1, max_length=100)
    url: Optional[str] = Field(None, max_length=500)
    page_id: Optional[str] = None
    parent_id: Optional[str] = None
    target: Optional[LinkTarget] = None
    order: Optional[int] = Field(None, ge=0)
    is_visible: Optional[bool] = None
    css_class: Optional[str] = Field(None, max_length=200)
    icon: Optional[str] = Field(None, max_length=100)


class ReorderEntry(BaseModel):
    id: str
    order: int = Field(ge=0)
    parent_id: Optional[str] = None


class ItemsReorder(BaseModel):
    items: list[ReorderEntry] = Field(min_length=1)
