from pydantic_settings import SettingsConfigDict, BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "Portfolio Server"
    app_version: str = "1.0.0"

    # Server settings
    server_host: str = "0.0.0.0"
    server_port: int = 8000
    server_reload: bool = False

    # CORS settings
    cors_origins: List[str] = ["*"]
    cors_allow_credentials: bool = False
    cors_allow_methods: List[str] = ["GET", "OPTIONS"]
    cors_allow_headers: List[str] = ["Content-Type", "Accept", "User-Agent"]
    cors_max_age: int = 86400  # preflight cached for 24 hours

    # Logging
    log_level: str = "INFO"
    log_dir: str = "logs"

    # Cache settings
    cache_maxsize: int = 500
    cache_ttl_seconds: int = 86400  # 24 hours

    # Fetching settings
    fetch_timeout: float = 8.0
    fetch_user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/127.0 Safari/537.36"
    )
    fetch_accept: str = "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8"
    fetch_accept_language: str = "pt-BR,pt;q=0.9,en-US;q=0.8,en;q=0.7"
    fetch_follow_redirects: bool = True
    fetch_max_redirects: int = 5
    fetch_block_private_hosts: bool = True

    # Response caching for intermediaries
    response_max_age: int = 3600
    response_stale_while_revalidate: int = 86400

    # Environment
    environment: str = "development"  # development, staging, production

    model_config = SettingsConfigDict(
        env_file=".env",  # Load from .env file if it exists
        case_sensitive=False,
        extra="ignore"  # Ignore extra fields in env file
    )

    @property
    def response_cache_control(self) -> str:
        """Cache-Control value sent with successful metadata responses."""
        return (
            f"public, max-age={self.response_max_age}, "
            f"stale-while-revalidate={self.response_stale_while_revalidate}"
        )


# Create a single instance of settings
settings = Settings()
