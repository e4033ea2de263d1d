import logging

from app.database import Base, engine
from app.logger import configure_logging
import app.models  # noqa: F401

logger = logging.getLogger("registry.cli")


def main():
    configure_logging()
    Base.metadata.create_all(bind=engine)
    logger.info("Created tables: %s", ", ".join(sorted(Base.metadata.tables)))


if __name__ == "__main__":
    main()
