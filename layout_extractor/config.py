import os
from typing import Optional

from dotenv import load_dotenv


class Settings:
    def __init__(self, log_level: Optional[str] = None, log_dir: Optional[str] = None):
        # Logging
        self.log_level = (log_level or os.getenv("LAYOUT_EXTRACTOR_LOG_LEVEL", "INFO")).upper()
        self.log_dir = log_dir or os.getenv("LAYOUT_EXTRACTOR_LOG_DIR", "logs")

        # Editor action
        self.notification_title = "XML Extractor"
        self.build_file_name = "build.gradle"

    @property
    def log_file_path(self) -> str:
        return os.path.join(self.log_dir, "layout_extractor.log")


_settings = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        load_dotenv()
        _settings = Settings()
    return _settings
