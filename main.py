#!/usr/bin/env python3
"""
Walkera PDF downloader
Scrapes the Walkera download center and saves every linked PDF under PDFs/
"""

from walkera_pdfs.crawlers.walkera_crawler import WalkeraCrawler
from walkera_pdfs.utils.logger import setup_logger


def main():
    setup_logger()
    crawler = WalkeraCrawler()
    crawler.run()


if __name__ == "__main__":
    main()
