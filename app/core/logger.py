# app/core/logger.py
import logging
_fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

def setup_logging(level: str = "INFO"):
    logging.basicConfig(level=level.upper(), format=_fmt)
