from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from portfolio_server.core.models import UrlMetadata
from portfolio_server.services.preview_adapter import LinkPreview


class OpenGraphResponse(BaseModel):
    """
    Wire shape of GET /api/metadata. The six og-prefixed fields mirror
    title, description, image, site_name, type and url of UrlMetadata.
    """

    model_config = ConfigDict(populate_by_name=True)

    og_title: str = Field(alias="ogTitle")
    og_description: str = Field(alias="ogDescription")
    og_image: str = Field(alias="ogImage")
    og_site_name: str = Field(alias="ogSiteName")
    og_type: str = Field(alias="ogType")
    og_url: str = Field(alias="ogUrl")
    domain: str
    favicon: str
    publication_type: str = Field(alias="publicationType")
    author: str | None = None
    published_time: str | None = Field(default=None, alias="publishedTime")
    modified_time: str | None = Field(default=None, alias="modifiedTime")
    tags: list[str] | None = None

    @classmethod
    def from_metadata(cls, metadata: UrlMetadata, preview: LinkPreview) -> "OpenGraphResponse":
        return cls(
            og_title=metadata.title,
            og_description=metadata.description,
            og_image=metadata.image,
            og_site_name=metadata.site_name,
            og_type=metadata.type,
            og_url=metadata.url,
            domain=metadata.domain,
            favicon=metadata.favicon,
            publication_type=preview.publication_type,
            author=metadata.author,
            published_time=metadata.published_time,
            modified_time=metadata.modified_time,
            tags=list(metadata.tags) if metadata.tags else None,
        )

    def to_wire(self) -> Dict[str, Any]:
        # Optional fields are left out rather than sent as null
        return self.model_dump(by_alias=True, exclude_none=True)
