# app/core/logging.py
import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO", echo_sql: bool = False) -> None:
    """Install a single console handler on the root logger."""
    root = logging.getLogger()
    root.setLevel(level.upper())

    # Re-running (reload, tests) must not stack handlers
    root.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    if not echo_sql:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    logging.getLogger(__name__).info("Logging configured at %s", level.upper())
