from fastapi import Request

from portfolio_server.services.container import ServiceContainer
from portfolio_server.services.metadata_service import MetadataService
from portfolio_server.services.url_validator import URLValidatorInterface


def get_container(request: Request) -> ServiceContainer:
    """Container built once at startup and kept on the application state"""
    return request.app.state.container


def get_metadata_service(request: Request) -> MetadataService:
    """FastAPI dependency returning the shared metadata service"""
    return get_container(request).get_metadata_service()


def get_url_validator(request: Request) -> URLValidatorInterface:
    return get_container(request).get_service(URLValidatorInterface)
