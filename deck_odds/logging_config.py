"""
logging_config.py

Package logger configuration - import 'logger' directly from this module
"""
import logging
import os
from datetime import datetime

from deck_odds.config import config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_log_settings = config['logging']

handlers = [logging.StreamHandler()]

# Timestamped log file, only when enabled in config
if _log_settings.get('log_to_file'):
    log_dir = _log_settings.get('log_dir') or "logs"
    os.makedirs(log_dir, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_filename = os.path.join(log_dir, f"deck_odds_{timestamp}.log")
    handlers.append(logging.FileHandler(log_filename, encoding="utf-8"))

# Create and export the package logger
logger = logging.getLogger("deck_odds")
logger.setLevel(getattr(logging, str(_log_settings.get('level', 'INFO')).upper(), logging.INFO))

formatter = logging.Formatter(LOG_FORMAT)
for handler in handlers:
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Child logger under the package logger, e.g. get_logger('outs')."""
    return logger.getChild(name)
