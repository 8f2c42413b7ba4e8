"""Text extraction service for PDF processing."""
import logging
from typing import List, Optional

from models.document import DocumentSource, PageText
from services.pdf_engine import PdfEngine, PageTextError

logger = logging.getLogger(__name__)


class ExtractionError(Exception):
    """Raised when a page's text cannot be retrieved; no partial text is kept."""

    def __init__(self, source: DocumentSource, page_number: int, message: str):
        self.source = source
        self.page_number = page_number
        super().__init__(message)


class TextExtractor:
    """Extracts the plain text of a document, one page at a time."""

    def __init__(self, engine: Optional[PdfEngine] = None):
        """
        Initialize TextExtractor.

        Args:
            engine: PDF engine used to open sources
        """
        self.engine = engine or PdfEngine()

    async def extract(self, source: DocumentSource, page_count: int) -> str:
        """
        Extract the full text of a document source.

        Pages are visited strictly in order 1..page_count and each page is
        awaited before the next one is requested. Fragments on a page are
        joined with a single space and every page is followed by a newline.

        Args:
            source: Document source to read
            page_count: Number of pages reported by the renderer

        Returns:
            Extracted text, one newline-terminated segment per page

        Raises:
            DocumentLoadError: If the source cannot be opened
            ExtractionError: If any page's text cannot be retrieved
        """
        pages = await self.extract_pages(source, page_count)
        full_text = "".join(page.text + "\n" for page in pages)

        logger.info(
            f"Extracted {len(full_text)} characters from {page_count} pages of {source.display_name}",
            extra={"page_count": page_count, "text_length": len(full_text)}
        )
        return full_text

    async def extract_pages(self, source: DocumentSource, page_count: int) -> List[PageText]:
        """Return the text of every page in page order."""
        handle = await self.engine.open(source)
        pages: List[PageText] = []

        try:
            for page_number in range(1, page_count + 1):
                try:
                    fragments = await handle.get_text_content(page_number)
                except PageTextError as e:
                    logger.error(
                        f"Aborting extraction of {source.display_name} at page {page_number}: {e}",
                        exc_info=True,
                        extra={"source": source.location, "page_number": page_number}
                    )
                    raise ExtractionError(source, page_number, str(e)) from e

                pages.append(PageText(page_number=page_number, fragments=fragments))
        finally:
            handle.close()

        return pages
