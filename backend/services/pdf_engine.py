"""PDF engine boundary built on PyMuPDF."""
import asyncio
import logging
from typing import List

import fitz  # PyMuPDF

from models.document import DocumentSource

logger = logging.getLogger(__name__)


class DocumentLoadError(Exception):
    """Raised when a document source cannot be opened as a PDF."""

    def __init__(self, source: DocumentSource, message: str):
        self.source = source
        super().__init__(message)


class PageTextError(Exception):
    """Raised when the text content of one page cannot be retrieved."""

    def __init__(self, page_number: int, message: str):
        self.page_number = page_number
        super().__init__(message)


class PageRenderError(Exception):
    """Raised when a page cannot be rasterized."""

    def __init__(self, page_number: int, message: str):
        self.page_number = page_number
        super().__init__(message)


class PdfHandle:
    """An opened PDF document.

    All PyMuPDF calls run in a worker thread; callers await them one at a time.
    """

    def __init__(self, document: fitz.Document, source: DocumentSource):
        self._document = document
        self.source = source

    @property
    def page_count(self) -> int:
        return self._document.page_count

    @property
    def closed(self) -> bool:
        return self._document.is_closed

    def _check_page(self, page_number: int) -> None:
        if not 1 <= page_number <= self.page_count:
            raise IndexError(
                f"Page {page_number} out of range 1..{self.page_count}"
            )

    def _read_fragments(self, page_number: int) -> List[str]:
        self._check_page(page_number)
        page = self._document.load_page(page_number - 1)
        fragments = []
        for block in page.get_text("dict")["blocks"]:
            # Image blocks have no "lines"
            for line in block.get("lines", []):
                for span in line["spans"]:
                    if span["text"]:
                        fragments.append(span["text"])
        return fragments

    async def get_text_content(self, page_number: int) -> List[str]:
        """
        Return the text fragments of one page in reading order.

        Args:
            page_number: 1-indexed page number

        Returns:
            Ordered list of text spans found on the page

        Raises:
            PageTextError: If the page does not exist or cannot be parsed
        """
        try:
            return await asyncio.to_thread(self._read_fragments, page_number)
        except Exception as e:
            raise PageTextError(page_number, f"Failed to read page {page_number}: {e}") from e

    def _rasterize(self, page_number: int, scale: float) -> bytes:
        self._check_page(page_number)
        page = self._document.load_page(page_number - 1)
        pixmap = page.get_pixmap(matrix=fitz.Matrix(scale, scale), alpha=False)
        return pixmap.tobytes("png")

    async def render(self, page_number: int, scale: float) -> bytes:
        """Rasterize one page as PNG at the given zoom scale."""
        try:
            return await asyncio.to_thread(self._rasterize, page_number, scale)
        except Exception as e:
            raise PageRenderError(page_number, f"Failed to render page {page_number}: {e}") from e

    def close(self) -> None:
        if not self._document.is_closed:
            self._document.close()


class PdfEngine:
    """Opens document sources with PyMuPDF."""

    def _open(self, source: DocumentSource) -> fitz.Document:
        document = fitz.open(source.location)
        if not document.is_pdf:
            document.close()
            raise ValueError(f"{source.display_name} is not a PDF document")
        if document.page_count == 0:
            document.close()
            raise ValueError(f"{source.display_name} has no pages")
        return document

    async def open(self, source: DocumentSource) -> PdfHandle:
        """
        Open a document source.

        Args:
            source: The document source to open

        Returns:
            PdfHandle that must be closed by the caller

        Raises:
            DocumentLoadError: If the file is missing or is not a valid PDF
        """
        try:
            document = await asyncio.to_thread(self._open, source)
        except Exception as e:
            logger.error(
                f"Failed to open PDF {source.display_name}: {e}",
                extra={"source": source.location}
            )
            raise DocumentLoadError(source, f"Failed to open {source.display_name}: {e}") from e

        logger.debug(f"Opened {source.display_name}: {document.page_count} pages")
        return PdfHandle(document, source)
