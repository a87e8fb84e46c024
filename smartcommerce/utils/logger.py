import logging
import os

LOG_LEVEL = os.environ.get("SMARTCOMMERCE_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"

logger = logging.getLogger("smartcommerce")

def configure_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Set the package log level and attach one stream handler.

    Streamlit re-executes the app script on every interaction, so this must
    not stack handlers when called again.
    """
    logger.setLevel(level.upper())
    if not logger.handlers:
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(ch)
    return logger

configure_logging()
