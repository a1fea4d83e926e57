"""
Logging setup and it configures:
- Log format
- Log level
- Output destination (stderr)

The main purpose:
Standardized application logging. Errors that end up as a generic 500
are logged here with their traceback, since the caller never sees them.
"""

import logging


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(f"task_breaker.{name}")
    if not logger.handlers:
        handler = logging.StreamHandler()
        fmt = logging.Formatter("[%(levelname)s] %(name)s: %(message)s")
        handler.setFormatter(fmt)
        logger.addHandler(handler)
        logger.setLevel(level)
    return logger
