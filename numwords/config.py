import logging
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Locale used when convert() is called without one
    default_locale: str = "en"

    # Extra directory with <locale>.json packs, searched before bundled ones
    pack_dir: Optional[Path] = None

    # Logging
    log_level: str = "warning"

    model_config = {
        "env_prefix": "NUMWORDS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()


def configure_logging() -> None:
    """Apply settings.log_level for applications that do not set up logging."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
