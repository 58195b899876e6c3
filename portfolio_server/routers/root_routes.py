from fastapi import APIRouter

from portfolio_server.core.config import settings

router = APIRouter()


@router.get("/")
def read_root():
    return {
        "message": f"{settings.app_name} is running!",
        "version": settings.app_version,
        "environment": settings.environment,
    }
