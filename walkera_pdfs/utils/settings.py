import logging
import os
from typing import Dict, Any, Optional
from ..utils.file_manager import FileManager

logger = logging.getLogger(__name__)

__version__ = '1.0.0'


class Settings:
    DEFAULT_SETTINGS = {
        "page_url": "https://en.walkera.com/index.php?id=download-center",
        "site_prefix": "https://en.walkera.com/",
        "cache_file": "walkera.html",
        "output_dir": "PDFs/",
        "output_dir_mode": 0o755,
        "download_timeout": 15 * 60,
        "deduplicate_links": True,
        "user_agent": f"walkera-pdfs/{__version__}",
    }

    SETTINGS_FILE = "walkera_settings.json"

    def __init__(self, overrides: Optional[Dict[str, Any]] = None):
        self.settings = self._load_settings()
        if overrides:
            self.settings.update(overrides)

    def _load_settings(self) -> Dict[str, Any]:
        """Load defaults, merged with the settings file when one exists"""
        settings = self.DEFAULT_SETTINGS.copy()
        if os.path.exists(self.SETTINGS_FILE):
            try:
                loaded = FileManager.load_json(self.SETTINGS_FILE)
            except (OSError, ValueError) as e:
                logger.warning(f"Ignoring unreadable {self.SETTINGS_FILE}: {e}")
                return settings

            if not isinstance(loaded, dict):
                logger.warning(f"Ignoring {self.SETTINGS_FILE}: expected a JSON object, got {type(loaded).__name__}")
                return settings

            logger.info(f"Applying {self.SETTINGS_FILE}: {', '.join(sorted(loaded))}")
            settings.update(loaded)
        return settings

    def get(self, key: str, default: Any = None) -> Any:
        """Get setting value"""
        return self.settings.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set setting value"""
        self.settings[key] = value

    def display_settings(self) -> None:
        logger.debug("Current settings:")
        for key, value in self.settings.items():
            logger.debug(f"   {key}: {value}")
