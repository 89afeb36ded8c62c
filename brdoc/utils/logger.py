# brdoc/utils/logger.py
import logging

from brdoc.core.config import settings

logger = logging.getLogger("brdoc")
logger.setLevel(settings.log_level)
if not logger.handlers:
    ch = logging.StreamHandler()
    formatter = logging.Formatter(settings.log_format)
    ch.setFormatter(formatter)
    logger.addHandler(ch)
