import logging
import os
import sys

FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

noisy_loggers = [
    "httpx",
    "uvicorn.access",
]

logger = logging.getLogger("exercise_naming")


def configure_logging() -> None:
    """
    Send every log record to stdout at LOG_LEVEL (default INFO).

    Replaces whatever handlers the root logger already has, so only entry
    points (the API app and scripts) call this. Importing the package leaves
    logging alone.
    """
    level = os.getenv("LOG_LEVEL", "INFO").upper()

    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):  # pragma: no cover
        root.removeHandler(h)

    for name in noisy_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(FORMAT))
    root.addHandler(handler)

    logger.setLevel(level)
    logger.debug(f"Logger initialised level={level}")
