import sys

import uvicorn
from loguru import logger

from .api import create_app
from .config import Settings, load_settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(settings: Settings) -> None:
    """Send logs to stdout and to a daily rotated log file."""
    logger.remove()
    logger.add(sys.stdout, format=LOG_FORMAT, level=settings.log_level)
    logger.add(
        settings.log_file,
        rotation="1 day",
        retention="7 days",
        level=settings.log_level,
    )


def main():
    """Main entry point: configure logging and serve the API."""
    settings = load_settings()
    configure_logging(settings)

    logger.info(f"Servidor backend rodando em http://localhost:{settings.api_port}")
    uvicorn.run(create_app(settings), host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
