import logging
from typing import List
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)


class LinkExtractor:
    def __init__(self, needle: str = '.pdf'):
        self.needle = needle

    def extract_pdf_links(self, html_content: str) -> List[str]:
        """Hrefs of every <a> whose lowercased value contains .pdf, in document order"""
        try:
            soup = BeautifulSoup(html_content, 'html.parser')
        except Exception as e:
            logger.error(f'Could not parse page: {e}')
            return []

        pdf_links = []
        for link in soup.find_all('a'):
            href = link.get('href')
            if href is None:
                continue
            href = href.strip()
            if self.needle in href.lower():
                pdf_links.append(href)

        return pdf_links

    def remove_duplicates(self, links: List[str]) -> List[str]:
        return list(dict.fromkeys(links))
