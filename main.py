import uvicorn

from portfolio_server.core.config import settings
from portfolio_server.main import app  # noqa: F401  (logging is configured on import)

if __name__ == "__main__":
    uvicorn.run(
        "portfolio_server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=settings.server_reload,
        reload_dirs=["."]
    )
