# project_manager/logging_config.py
from __future__ import annotations

import logging
from typing import Optional

from project_manager.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Simple logging setup:

    - Reset any existing handlers on the root logger.
    - Attach a StreamHandler to stdout so logs show in uvicorn's console.
    - Also attach a FileHandler when LOG_FILE is set.
    - Use LOG_LEVEL from settings (default INFO).
    """
    settings = settings or get_settings()

    level_name = settings.log_level or "INFO"
    level = getattr(logging, level_name.upper(), logging.INFO)

    root_logger = logging.getLogger()

    # Remove any handlers uvicorn or previous config attached
    for h in list(root_logger.handlers):
        root_logger.removeHandler(h)

    root_logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(settings.log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.debug("Logging configured (level=%s)", level_name)
