from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, Response

from portfolio_server.config.logging_config import get_logger
from portfolio_server.core.config import settings
from portfolio_server.dependencies.metadata_deps import get_metadata_service, get_url_validator
from portfolio_server.exceptions.metadata import InvalidURLFormatException, MissingURLParameterException
from portfolio_server.models.metadata_model import OpenGraphResponse
from portfolio_server.services.metadata_service import MetadataService
from portfolio_server.services.preview_adapter import build_link_preview
from portfolio_server.services.url_validator import URLValidatorInterface

logger = get_logger(__name__)

router = APIRouter()


def preflight_headers() -> dict:
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": "GET, OPTIONS",
        "Access-Control-Allow-Headers": ", ".join(settings.cors_allow_headers),
        "Access-Control-Max-Age": str(settings.cors_max_age),
    }


@router.get("")
async def get_metadata(
    url: Optional[str] = Query(None, description="URL to build a link preview for"),
    service: MetadataService = Depends(get_metadata_service),
    url_validator: URLValidatorInterface = Depends(get_url_validator),
):
    if url is None or url == "":
        raise MissingURLParameterException()

    target_url = url.strip()
    if not url_validator.is_absolute_url(target_url):
        raise InvalidURLFormatException(target_url)

    logger.info(f"Received request for link metadata: {target_url}")
    try:
        metadata = await service.get_metadata(target_url)
    except Exception as e:
        # Extraction problems never turn into a 5xx
        logger.error(f"Error in metadata request for {target_url}: {str(e)}", exc_info=True)
        metadata = service.build_fallback(target_url)

    body = OpenGraphResponse.from_metadata(metadata, build_link_preview(metadata))
    return JSONResponse(
        content=body.to_wire(),
        headers={
            "Cache-Control": settings.response_cache_control,
            "Access-Control-Allow-Origin": "*",
            "Vary": "Accept-Encoding",
        },
    )


@router.options("")
async def metadata_preflight():
    return Response(status_code=200, headers=preflight_headers())
