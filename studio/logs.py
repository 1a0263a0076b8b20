import logging
import sys

from uvicorn.logging import DefaultFormatter

_FORMAT = "%(asctime)s %(name)s %(levelprefix)s %(message)s"


def setup_logging(level: str = "INFO") -> None:
    sh = logging.StreamHandler(sys.stdout)
    sh.setFormatter(DefaultFormatter(_FORMAT))

    logging.basicConfig(level=level, handlers=[sh], force=True)


# Modified from the defaults in uvicorn.config.LOGGING_CONFIG
def uvicorn_log_config(level: str = "INFO") -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "()": "uvicorn.logging.DefaultFormatter",
                "fmt": _FORMAT,
                "use_colors": None,
            },
            "access": {
                "()": "uvicorn.logging.AccessFormatter",
                "fmt": "%(asctime)s %(name)s %(levelprefix)s %(client_addr)s - \"%(request_line)s\" %(status_code)s",
            },
        },
        "handlers": {
            "default": {"formatter": "default", "class": "logging.StreamHandler", "stream": "ext://sys.stdout"},
            "access": {"formatter": "access", "class": "logging.StreamHandler", "stream": "ext://sys.stdout"},
        },
        "loggers": {
            "uvicorn": {"handlers": ["default"], "level": level, "propagate": False},
            "uvicorn.error": {"level": level},
            "uvicorn.access": {"handlers": ["access"], "level": level, "propagate": False},
            "studio": {"handlers": ["default"], "level": level, "propagate": False},
        },
    }
