"""Configuration for the playground server and client."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8787
    public_url: str = "http://localhost:8787"

    # Logging Configuration
    log_level: str = "INFO"
    json_logs: bool = False

    # Client Configuration
    client_base_url: str = "http://localhost:8787"
    client_timeout: float = 10.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
