"""Page count discovery and page rasterization."""
import logging
from typing import Dict, Optional, Tuple

from models.document import DocumentSource
from services.pdf_engine import PdfEngine, PdfHandle, PageRenderError

logger = logging.getLogger(__name__)


class LoadSupersededError(Exception):
    """Raised when a load finishes after another load or close replaced it."""

    def __init__(self, source: DocumentSource):
        self.source = source
        super().__init__(f"Load of {source.display_name} was superseded")


class PageRenderer:
    """Keeps the active document open and renders its pages at any zoom."""

    def __init__(self, engine: Optional[PdfEngine] = None):
        self.engine = engine or PdfEngine()
        self._handle: Optional[PdfHandle] = None
        self._cache: Dict[Tuple[int, float], bytes] = {}
        # Bumped by every load and close; an open that returns under an
        # older token is closed instead of adopted
        self._load_token = 0

    @property
    def page_count(self) -> int:
        return self._handle.page_count if self._handle else 0

    @property
    def source(self) -> Optional[DocumentSource]:
        return self._handle.source if self._handle else None

    async def load(self, source: DocumentSource) -> int:
        """
        Open a document source and report its page count.

        Any previously loaded document is closed first.

        Args:
            source: Document source to load

        Returns:
            Total number of pages

        Raises:
            DocumentLoadError: If the engine cannot open the source
            LoadSupersededError: If another load or close happened while opening
        """
        self.close()
        token = self._load_token
        handle = await self.engine.open(source)

        if token != self._load_token:
            handle.close()
            logger.info(f"Dropped superseded load of {source.display_name}")
            raise LoadSupersededError(source)

        self._handle = handle
        page_count = handle.page_count
        logger.info(
            f"Loaded {source.display_name}: {page_count} pages",
            extra={"source": source.location, "page_count": page_count}
        )
        return page_count

    async def render(self, page_number: int, scale: float) -> bytes:
        """
        Render one page of the loaded document as PNG.

        Args:
            page_number: 1-indexed page number
            scale: Zoom scale

        Returns:
            PNG image bytes

        Raises:
            PageRenderError: If nothing is loaded or the page is out of range
        """
        handle = self._handle
        if handle is None:
            raise PageRenderError(page_number, "No document loaded")
        if not 1 <= page_number <= handle.page_count:
            raise PageRenderError(
                page_number,
                f"Page {page_number} out of range 1..{handle.page_count}"
            )

        key = (page_number, round(scale, 2))
        if key in self._cache:
            return self._cache[key]

        image = await handle.render(page_number, key[1])
        # Only cache if the document was not replaced while rendering
        if handle is self._handle:
            self._cache[key] = image
        return image

    def close(self) -> None:
        """Close the loaded document and drop rendered pages."""
        self._load_token += 1
        self._cache.clear()
        if self._handle is not None:
            self._handle.close()
            self._handle = None
