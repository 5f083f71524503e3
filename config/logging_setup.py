import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(name: str, level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """Attach one handler to the ``name`` logger (the application package).

    Logs go to ``log_file`` when given, otherwise to stdout.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    # Clear existing handlers
    logger.handlers = []

    if log_file:
        log_file = os.path.normpath(log_file)
        directory = os.path.dirname(log_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    configure_quiet_logging()
    return logger


def configure_quiet_logging() -> None:
    # werkzeug request lines only on errors
    logging.getLogger("werkzeug").setLevel(logging.ERROR)
