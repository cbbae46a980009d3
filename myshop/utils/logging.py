# myshop/utils/logging.py
import logging

from myshop.utils.settings import LOG_LEVEL

ROOT_LOGGER_NAME = "myshop"
LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def resolve_level(name: str) -> str:
    level = name.upper()
    return level if level in LEVELS else "INFO"


def _configure_root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    # get_logger is called from many modules, handler goes on once
    if root.handlers:
        return root

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    root.addHandler(console_handler)
    level = resolve_level(LOG_LEVEL)
    root.setLevel(level)
    if level != LOG_LEVEL.upper():
        root.warning(f"Nieznany LOG_LEVEL {LOG_LEVEL!r}, uzywam INFO")
    return root


def get_logger(name: str) -> logging.Logger:
    _configure_root()
    return logging.getLogger(name)
