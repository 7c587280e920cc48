import logging
from typing import Optional

from service_proxy.config.settings import Settings


def _configure_root_logger(level: Optional[str] = None) -> None:
    """
    Configure root logger one time.
    If already configured, skip.
    """
    root = logging.getLogger()

    if root.handlers:
        # Already configured → do nothing
        return

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)-8s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)
    root.addHandler(handler)

    root.setLevel(level or Settings.System.LOG_LEVEL)


def setup_logger(name: str = "service_proxy", level: Optional[str] = None) -> logging.Logger:
    """
    Create/get logger with standard formatting.
    """
    _configure_root_logger(level)

    logger = logging.getLogger(name)
    logger.propagate = True  # send to root handler
    return logger
