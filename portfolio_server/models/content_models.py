"""
Typed entries coming from the headless CMS.

Each content kind declares its required and optional fields and is tagged by
its ``contentTypeId``. Raw entries are decoded once with ``decode_entry``
where they enter the application; everything past that point works with
these models instead of loose dictionaries.
"""

import re
import datetime
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

LINK_SPLIT_RE = re.compile(r"[\s,]+")


def normalize_asset_url(url: str) -> str:
    """CMS asset URLs are often protocol-relative; serve them over https"""
    url = (url or "").strip()
    if not url or url.startswith(("https://", "http://")):
        return url
    if url.startswith("//"):
        return f"https:{url}"
    return f"https://{url}"


class Asset(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str
    title: str | None = None
    description: str | None = None
    width: int | None = None
    height: int | None = None

    @field_validator("url")
    @classmethod
    def _normalize_url(cls, value: str) -> str:
        value = normalize_asset_url(value)
        if not value:
            raise ValueError("asset url must not be empty")
        return value


class Tag(BaseModel):
    name: str
    description: str = ""


class TagEntry(Tag):
    model_config = ConfigDict(populate_by_name=True)

    content_type_id: Literal["tags"] = Field(alias="contentTypeId")


class BlogPost(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    content_type_id: Literal["blogPost"] = Field(alias="contentTypeId")
    title: str
    slug: str
    date: datetime.date
    description: str = ""
    content: dict[str, Any] = Field(default_factory=dict)
    banner: Asset | None = None
    author: str | None = None


class Publication(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    content_type_id: Literal["publicacoes"] = Field(alias="contentTypeId")
    title: str
    links: str
    banner: Asset | None = None
    description: dict[str, Any] | None = None
    tags: list[Tag] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def _tags_as_list(cls, value: Any) -> Any:
        # A single linked tag arrives as an object rather than a list
        if value is None:
            return []
        if isinstance(value, dict):
            return [value]
        return value

    def link_urls(self) -> list[str]:
        """Absolute http(s) URLs listed in the links field, in order"""
        urls = []
        for candidate in LINK_SPLIT_RE.split(self.links or ""):
            if candidate.startswith(("http://", "https://")) and candidate not in urls:
                urls.append(candidate)
        return urls


class GalleryEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    content_type_id: Literal["gallery"] = Field(alias="contentTypeId")
    photos: list[Asset] = Field(min_length=1)
    tags: list[Tag] = Field(default_factory=list)


ContentEntry = Annotated[
    Union[BlogPost, Publication, GalleryEntry, TagEntry],
    Field(discriminator="content_type_id"),
]

_entry_adapter = TypeAdapter(ContentEntry)


def decode_entry(raw: dict[str, Any]) -> BlogPost | Publication | GalleryEntry | TagEntry:
    """Validate a raw CMS entry into its typed model; raises pydantic.ValidationError"""
    return _entry_adapter.validate_python(raw)
