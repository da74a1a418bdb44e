import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once at startup."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # SQLAlchemy echo is driven by settings.sql_echo, keep its logger quiet otherwise
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
