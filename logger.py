import logging
from pathlib import Path
import sys

from config import log_config

LOG_LEVEL = getattr(logging, str(log_config.kana_seeder_log_level).upper(), logging.INFO)

LOGS_DIR = Path(__file__).resolve().parent / "logs"
log_file_path = LOGS_DIR / "kana_seeder.log"

# pymongo logs every heartbeat and command at DEBUG
logging.getLogger("pymongo").setLevel(max(LOG_LEVEL, logging.WARNING))

_handlers: list[logging.Handler] = []


def _shared_handlers() -> list[logging.Handler]:
    """Console and file handlers, created once and attached to every module logger."""
    if not _handlers:
        LOGS_DIR.mkdir(exist_ok=True)
        formatter = logging.Formatter(
            "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )
        for handler in (
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(log_file_path, mode="a", encoding="utf-8"),
        ):
            handler.setFormatter(formatter)
            _handlers.append(handler)
    return _handlers


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(LOG_LEVEL)
    if not logger.hasHandlers():
        for handler in _shared_handlers():
            logger.addHandler(handler)
    return logger
