import uvicorn

from .api import create_app
from .config import get_settings
from .logs import setup_logging, uvicorn_log_config


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    uvicorn.run(
        create_app(settings=settings),
        host=settings.host,
        port=settings.port,
        log_config=uvicorn_log_config(settings.log_level),
    )


if __name__ == "__main__":
    main()
