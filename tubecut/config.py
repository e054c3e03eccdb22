import os
import logging

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
LOG_LEVEL = os.getenv("TUBECUT_LOG_LEVEL", "INFO")

def _read_stock_length(raw: str) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ValueError(f"TUBECUT_STOCK_LENGTH ist keine Zahl: {raw!r}")
    if value <= 0:
        raise ValueError(f"TUBECUT_STOCK_LENGTH muss positiv sein: {raw!r}")
    return value

def default_stock_length() -> float:
    return _read_stock_length(os.getenv("TUBECUT_STOCK_LENGTH", "5500"))

def configure_logging(level: str = None):
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=LOG_FORMAT)
