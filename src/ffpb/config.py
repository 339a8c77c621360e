"""Application configuration using Pydantic BaseSettings."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """ffpb configuration loaded from environment variables."""

    model_config = {"env_prefix": "FFPB_", "env_file": ".env", "extra": "ignore"}

    # Child process
    ffmpeg_binary: str = "ffmpeg"
    shutdown_timeout: float = 5.0

    # Stream reading
    poll_interval: float = 0.1
    lookahead_size: int = 5
    read_chunk_size: int = 4096
    stderr_tail_lines: int = 30

    # Progress bar
    dynamic_ncols: bool = True
    bar_colour: str | None = None

    # Logging
    log_level: str = "WARNING"


def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
