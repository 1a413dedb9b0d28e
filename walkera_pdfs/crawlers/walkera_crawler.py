import logging
from dataclasses import dataclass, field
from typing import List
from urllib3.exceptions import HTTPError
from ..core.http_client import HttpClientInterface, Urllib3HttpClient
from ..core.page_cache import PageCache
from ..downloaders.file_downloader import DownloadStatus, FileDownloader
from ..utils.file_manager import FileManager
from ..utils.settings import Settings
from ..utils.url_validator import is_url_valid
from .link_extractor import LinkExtractor

logger = logging.getLogger(__name__)


@dataclass
class CrawlResult:
    links: List[str] = field(default_factory=list)
    downloaded: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    invalid: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)


class WalkeraCrawler:
    def __init__(self, settings: Settings = None, http_client: HttpClientInterface = None):
        self.settings = settings or Settings()
        self.http_client = http_client or Urllib3HttpClient(user_agent=self.settings.get('user_agent'))
        self.page_cache = PageCache(self.settings.get('cache_file'))
        self.link_extractor = LinkExtractor()
        self.file_downloader = FileDownloader(
            self.http_client,
            download_dir=self.settings.get('output_dir'),
            timeout=self.settings.get('download_timeout'),
        )

    def fetch_page(self, url: str) -> str:
        logger.info(f'Scraping {url}')
        try:
            return self.http_client.get(url).decode('utf-8', errors='replace')
        except HTTPError as e:
            logger.error(f'Could not fetch {url}: {e}')
            return ''

    def load_page(self) -> str:
        """Cached page HTML, fetching and caching it on the first run"""
        if not self.page_cache.exists():
            content = self.fetch_page(self.settings.get('page_url'))
            if content:
                self.page_cache.write(content)

        if self.page_cache.exists():
            return self.page_cache.read()
        return ''

    def normalize_link(self, link: str) -> str:
        prefix = self.settings.get('site_prefix')
        # Absolute links to other hosts are kept as they are. Only relative links get
        # the site prefix, since prefixing an absolute URL yields an unusable address.
        if link.startswith(prefix) or link.lower().startswith(('http://', 'https://')):
            return link
        return prefix + link.lstrip('/')

    def prepare_links(self, links: List[str]) -> List[str]:
        absolute = [self.normalize_link(link) for link in links]
        if self.settings.get('deduplicate_links'):
            absolute = self.link_extractor.remove_duplicates(absolute)
        return absolute

    def run(self) -> CrawlResult:
        self.settings.display_settings()
        result = CrawlResult()

        html_content = self.load_page()
        links = self.link_extractor.extract_pdf_links(html_content)
        logger.info(f'Found {len(links)} PDF links')

        output_dir = self.settings.get('output_dir')
        FileManager.ensure_directory(output_dir, self.settings.get('output_dir_mode'))

        result.links = self.prepare_links(links)
        for url in result.links:
            if not is_url_valid(url):
                logger.warning(f'Skipping invalid URL: {url}')
                result.invalid.append(url)
                continue

            status = self.file_downloader.download(url)
            if status is DownloadStatus.DOWNLOADED:
                result.downloaded.append(self.file_downloader.destination_for(url))
            elif status is DownloadStatus.SKIPPED:
                result.skipped.append(url)
            else:
                result.failed.append(url)

        logger.info(
            f'Done: {len(result.downloaded)} downloaded, {len(result.skipped)} skipped, '
            f'{len(result.failed)} failed, {len(result.invalid)} invalid'
        )
        return result
