import logging

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class LoggingSettings(BaseSettings):
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

    model_config = ConfigDict(env_file=".env", extra="ignore")


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Install a single stream handler on the root logger."""
    if settings is None:
        settings = LoggingSettings()
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(settings.LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
