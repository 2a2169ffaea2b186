import logging
import sys
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from spider.schemas.game_engine import SuitVariant

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App config
    DEBUG: bool = False

    # Dealing
    DEFAULT_VARIANT: SuitVariant = SuitVariant.TWO
    DEAL_SEED: int | None = None

    @field_validator("DEFAULT_VARIANT", mode="before")
    @classmethod
    def parse_variant(cls, v: object) -> object:
        if isinstance(v, int) and not isinstance(v, bool):
            return SuitVariant.from_suit_count(v)
        if isinstance(v, str):
            v = v.strip().lower()
            if v.isdigit():
                return SuitVariant.from_suit_count(int(v))
        return v


def configure_logging(debug: bool = False) -> None:
    """Configure logging for the application."""
    log_level = logging.DEBUG if debug else logging.INFO
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    configure_logging(settings.DEBUG)
    logger.info("Settings loaded successfully")
    logger.debug(
        "Default variant: %s, deal seed: %s",
        settings.DEFAULT_VARIANT.label,
        settings.DEAL_SEED,
    )
    return settings
