import os
import logging

from typing import Optional

from .config import Settings, get_settings

_FILE_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
_CONSOLE_FORMAT = "%(levelname)s | %(message)s"


def setup_logger(settings: Optional[Settings] = None) -> logging.Logger:
    settings = settings or get_settings()
    os.makedirs(settings.log_dir, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(settings.log_level)

    # Prevent adding handlers multiple times
    if not any(getattr(h, "_layout_extractor", False) for h in root.handlers):
        file_handler = logging.FileHandler(settings.log_file_path, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        file_handler._layout_extractor = True
        root.addHandler(file_handler)

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
        console_handler._layout_extractor = True
        root.addHandler(console_handler)

    return root
