"""Application configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings with env var overrides."""

    # Grouping
    margin_of_error: float = 3.0  # ms, interval change tolerance
    repetition_tolerance: float = 3.0  # ms, strict bound for repeated patterns

    # API
    max_events: int = 100_000

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    model_config = {"env_prefix": "RHYTHMCHAIN_"}


settings = Settings()
