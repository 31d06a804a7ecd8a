import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function} - {message}"


def setup_logging(root: str, level: str = "INFO", console: bool = True):
    """Log to <root>/YYYY/MM/DD/decoder.log and, optionally, to stderr.

    Only element IDs and header metadata reach the log; decoded values are
    personal data and are never written.
    """
    logdir = Path(root) / datetime.now().strftime("%Y/%m/%d")
    logdir.mkdir(parents=True, exist_ok=True)
    logger.remove()
    logger.add(
        str(logdir / "decoder.log"),
        format=LOG_FORMAT,
        rotation="00:00",
        retention="14 days",
        level=level,
        enqueue=True,
        backtrace=True,
        diagnose=False,  # el volcado de variables locales expondría el payload
    )
    if console:
        # stdout queda libre para el JSON del CLI
        logger.add(lambda m: print(m, end="", file=sys.stderr), format=LOG_FORMAT, level=level)
    return logger


def setup_logging_from_cfg(cfg: dict, level: Optional[str] = None):
    """Configure logging from the settings dict; LOG_LEVEL overrides app.log_level."""
    root = cfg.get("paths", {}).get("logs_root", "logs")
    level = level or os.getenv("LOG_LEVEL") or cfg.get("app", {}).get("log_level", "INFO")
    return setup_logging(root, level.upper())
