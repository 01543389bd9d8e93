from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PageCreate(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=200)
    slug: str = Field(min_length=1, max_length=200)
    seo_title: Optional[str] = Field(None, max_length=200)
    seo_description: Optional[str] = None
    seo_keywords: Optional[str] = Field(None, max_length=500)


class PageUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    slug: Optional[str] = Field(None, min_length=1, max_length=200)
    seo_title: Optional[str] = Field(None, max_length=200)
    seo_description: Optional[str] = None
    seo_keywords: Optional[str] = Field(None, max_length=500)


class SectionCreate(BaseModel):
    section_template_id: str = Field(min_length=1)
    props: Optional[dict] = None
    order: Optional[int] = Field(None, ge=1)


class SectionUpdate(BaseModel):
    props: Optional[dict] = None
    order: Optional[int] = Field(None, ge=1)


class SectionReorder(BaseModel):
    section_ids: list[str] = Field(min_length=1)
