import logging
from ..utils.file_manager import FileManager

logger = logging.getLogger(__name__)


class PageCache:
    """Local snapshot of the download-center HTML, reused across runs"""

    def __init__(self, path: str):
        self.path = path

    def exists(self) -> bool:
        return FileManager.file_exists(self.path)

    def read(self) -> str:
        logger.debug(f'Reading cached page from {self.path}')
        return FileManager.read_text(self.path)

    def write(self, content: str) -> bool:
        logger.debug(f'Caching page to {self.path}')
        return FileManager.append_text(self.path, content)
