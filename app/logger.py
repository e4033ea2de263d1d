import logging

from app.config import settings


def configure_logging() -> logging.Logger:
    level = getattr(logging, (settings.log_level or "INFO").upper(), logging.INFO)
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
        )
        root.addHandler(handler)
    root.setLevel(level)

    logger = logging.getLogger("registry")
    logger.setLevel(level)
    return logger
