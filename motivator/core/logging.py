import logging

from motivator.core.config import settings


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        fmt = logging.Formatter("[%(levelname)s] %(name)s: %(message)s")
        handler.setFormatter(fmt)
        logger.addHandler(handler)
        logger.setLevel(settings.LOG_LEVEL.upper())
    return logger


def safe_snippet(text: str, n: int = 400) -> str:
    return (text or "")[:n].replace("\n", "\\n").replace("\r", "\\r")


"""
Logging setup and it configures:
- Log format
- Log level (LOG_LEVEL setting)
- Output destination

The main purpose:
Standardized application logging. Upstream bodies go through safe_snippet
so a single log line stays bounded.
"""
