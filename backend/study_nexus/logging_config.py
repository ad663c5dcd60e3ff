import logging
import os
from logging.config import dictConfig

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging() -> None:
    """Configure planner logging; telemetry lines get their own level knob."""
    level = os.getenv("NEXUS_LOG_LEVEL", "INFO").upper()
    telemetry_level = os.getenv("NEXUS_TELEMETRY_LOG_LEVEL", level).upper()

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": DEFAULT_LOG_FORMAT,
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "loggers": {
                "study_nexus.telemetry": {
                    "level": telemetry_level,
                },
            },
            "root": {
                "handlers": ["default"],
                "level": level,
            },
        }
    )

    if os.getenv("NEXUS_DEBUG_HTTP", "0") == "1":
        logging.getLogger("uvicorn.access").setLevel(logging.DEBUG)
