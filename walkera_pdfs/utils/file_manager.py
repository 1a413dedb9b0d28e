import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)


class FileManager:
    @staticmethod
    def file_exists(path: str) -> bool:
        return os.path.isfile(path)

    @staticmethod
    def directory_exists(path: str) -> bool:
        return os.path.isdir(path)

    @staticmethod
    def ensure_directory(directory: str, mode: int = 0o755) -> bool:
        """Create directory if missing; failures are logged, not raised"""
        if not directory or FileManager.directory_exists(directory):
            return True
        try:
            os.makedirs(directory, mode=mode)
        except OSError as e:
            logger.error(f'Could not create directory {directory}: {e}')
            return False
        return True

    @staticmethod
    def read_text(path: str) -> str:
        try:
            with open(path, encoding='utf-8', errors='replace') as file:
                return file.read()
        except OSError as e:
            logger.error(f'Could not read {path}: {e}')
            return ''

    @staticmethod
    def append_text(path: str, content: str) -> bool:
        try:
            fd = os.open(path, os.O_APPEND | os.O_CREAT | os.O_WRONLY, 0o644)
            with open(fd, 'w', encoding='utf-8') as file:
                file.write(content + '\n')
        except OSError as e:
            logger.error(f'Could not write {path}: {e}')
            return False
        return True

    @staticmethod
    def load_json(filepath: str) -> Any:
        with open(filepath) as file:
            return json.load(file)
