# This project was developed with assistance from AI tools.
"""Root logger configuration, applied once at application startup."""

import logging

_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

# Third-party loggers that are chatty at INFO
_NOISY_LOGGERS = ("httpx", "httpcore", "openai", "sqlalchemy.engine")


def setup_logging(level: str = "INFO", *, silence_noisy_loggers: bool = True) -> None:
    """Configure the root logger with a single stream handler.

    Args:
        level: Root log level name (DEBUG, INFO, ...).
        silence_noisy_loggers: Raise client-library loggers to WARNING.
    """
    logging.basicConfig(level=level, format=_FORMAT, force=True)
    if silence_noisy_loggers:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
