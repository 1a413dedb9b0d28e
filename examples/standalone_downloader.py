from walkera_pdfs.core.http_client import Urllib3HttpClient
from walkera_pdfs.downloaders.file_downloader import FileDownloader
from walkera_pdfs.utils.file_manager import FileManager
from walkera_pdfs.utils.logger import setup_logger


def download_pdfs_from_links():
    # Example absolute PDF links
    download_links = [
        "https://en.walkera.com/upload/manual/example_1.pdf",
        "https://en.walkera.com/upload/manual/example_2.pdf",
    ]

    logger = setup_logger()

    # Initialize components
    FileManager.ensure_directory("PDFs")
    http_client = Urllib3HttpClient()
    downloader = FileDownloader(http_client, download_dir="PDFs")

    # Download files
    downloaded_files = downloader.download_pdfs(download_links)

    logger.info(f"Downloaded {len(downloaded_files)} files:")
    for file_path in downloaded_files:
        logger.info(f"  - {file_path}")


if __name__ == "__main__":
    download_pdfs_from_links()
