# wpdesktop/log.py
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict

from .settings import config_dir

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_configured = False

def configure_logging(settings: Dict[str, Any]) -> logging.Logger:
    """Attach a rotating log file and stderr output to the ``wpdesktop`` logger."""
    global _configured
    logger = logging.getLogger("wpdesktop")
    if _configured:
        return logger

    log_path = config_dir() / "wpdesktop.log"
    formatter = logging.Formatter(_FORMAT)
    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=1_048_576,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(stream_handler)
    logger.setLevel(settings.get("log", {}).get("level", "INFO"))
    logger.propagate = False
    _configured = True
    logger.info("Logging initialised at %s", log_path)
    return logger
