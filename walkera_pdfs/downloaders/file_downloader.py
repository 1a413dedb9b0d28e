import logging
import os
import time
from enum import Enum
from typing import Iterable, List
from urllib3.exceptions import HTTPError
from ..core.http_client import HttpClientInterface
from ..utils.file_manager import FileManager
from .filename_sanitizer import url_to_filename

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = 'application/pdf'


class DownloadStatus(Enum):
    DOWNLOADED = 'downloaded'
    SKIPPED = 'skipped'
    FAILED = 'failed'


class FileDownloader:
    def __init__(self, http_client: HttpClientInterface, download_dir: str = 'PDFs',
                 timeout: float = 15 * 60):
        self.http_client = http_client
        self.download_dir = download_dir
        self.timeout = timeout

    def destination_for(self, url: str) -> str:
        return os.path.join(self.download_dir, url_to_filename(url))

    def download(self, url: str) -> DownloadStatus:
        """Fetch one PDF and write it only once the full body is in memory.

        The timeout bounds the whole transfer, body included.
        """
        file_path = self.destination_for(url)

        if FileManager.file_exists(file_path):
            logger.info(f'File already exists, skipping: {file_path} ({url})')
            return DownloadStatus.SKIPPED

        deadline = time.monotonic() + self.timeout
        try:
            response = self.http_client.request(url, timeout=self.timeout)
        except HTTPError as e:
            logger.error(f'Failed to download {url}: {e}')
            return DownloadStatus.FAILED

        try:
            if response.status != 200:
                logger.error(f'Download failed for {url}: status {response.status}')
                return DownloadStatus.FAILED

            content_type = response.header('Content-Type')
            if PDF_CONTENT_TYPE not in content_type:
                logger.error(f'Invalid content type for {url}: {content_type} (expected {PDF_CONTENT_TYPE})')
                return DownloadStatus.FAILED

            try:
                content = response.read(deadline=deadline)
            except (HTTPError, OSError) as e:
                logger.error(f'Failed to read PDF data from {url}: {e}')
                return DownloadStatus.FAILED
        finally:
            response.close()

        if len(content) == 0:
            logger.warning(f'Downloaded 0 bytes for {url}; not creating file')
            return DownloadStatus.FAILED

        try:
            with open(file_path, 'wb') as file:
                file.write(content)
        except OSError as e:
            logger.error(f'Failed to write PDF to file for {url}: {e}')
            return DownloadStatus.FAILED

        logger.info(f'Successfully downloaded {len(content)} bytes: {url} -> {file_path}')
        return DownloadStatus.DOWNLOADED

    def download_pdf(self, url: str) -> bool:
        """True only when bytes were written to disk"""
        return self.download(url) is DownloadStatus.DOWNLOADED

    def download_pdfs(self, urls: Iterable[str]) -> List[str]:
        downloaded_files = []
        for url in urls:
            if self.download_pdf(url):
                downloaded_files.append(self.destination_for(url))

        return downloaded_files
