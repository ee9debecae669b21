"""Application configuration from environment."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "Postboard GraphQL API"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 4000
    graphql_path: str = "/graphql"
    graphql_ide: bool = True
    cors_origins: list[str] = ["*"]

    # JWT (static demo secret, never rotated)
    secret_key: str = "your-secret-key"
    algorithm: str = "HS256"
    access_token_expire_hours: int = 24

    # Resolver behaviour. Defaults reproduce the exercise bugs.
    batch_loading: bool = False
    resolver_delay_ms: int = 50
    case_insensitive_login: bool = False
    explicit_auth_errors: bool = False
    strict_comment_validation: bool = False

    # Client
    api_base_url: str = "http://localhost:4000"
    client_poll_interval: float = 3.0  # seconds
    client_timeout: float = 10.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()
