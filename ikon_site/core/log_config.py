# ikon_site/core/log_config.py
from logging.config import dictConfig


def configure_logging(level: str = "INFO") -> None:
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "root": {"handlers": ["console"], "level": "WARNING"},
            "loggers": {
                "ikon_site": {"level": level.upper()},
                "sqlalchemy.engine": {"level": "WARNING"},
            },
        }
    )
