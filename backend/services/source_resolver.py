"""Tracks which PDF is the active document source."""
import logging
import os
import tempfile
from typing import Optional

from config import DEFAULT_PDF_PATH
from models.document import DocumentSource, SourceKind

logger = logging.getLogger(__name__)


class SourceResolver:
    """Holds the active document source and releases replaced uploads."""

    def __init__(self, default_path: Optional[str] = None):
        """
        Initialize SourceResolver.

        Args:
            default_path: Path of the bundled resume (defaults to DEFAULT_PDF_PATH)
        """
        self.default_path = default_path or DEFAULT_PDF_PATH
        self._current: Optional[DocumentSource] = None

    @property
    def current(self) -> Optional[DocumentSource]:
        """The active document source, or None before initialization."""
        return self._current

    def use_default(self) -> DocumentSource:
        """Adopt the bundled default resume as the active source."""
        source = DocumentSource(
            kind=SourceKind.DEFAULT,
            location=self.default_path,
            display_name=os.path.basename(self.default_path),
        )
        self._adopt(source)
        return source

    def select_upload(self, filename: str, data: bytes) -> DocumentSource:
        """
        Adopt an uploaded file as the active source.

        The bytes are written to a fresh temporary file; no content
        validation happens here.

        Args:
            filename: Name of the uploaded file as given by the client
            data: Raw file content

        Returns:
            The new active DocumentSource
        """
        handle, path = tempfile.mkstemp(prefix="resume_", suffix=".pdf")
        with os.fdopen(handle, "wb") as f:
            f.write(data)

        source = DocumentSource(
            kind=SourceKind.UPLOADED,
            location=path,
            display_name=filename or os.path.basename(path),
            is_temporary=True,
        )
        self._adopt(source)
        return source

    def release(self) -> None:
        """Drop the active source and delete its temporary file, if any."""
        previous = self._current
        self._current = None
        if previous is not None and previous.is_temporary:
            try:
                os.remove(previous.location)
            except FileNotFoundError:
                logger.warning(f"Temporary upload already removed: {previous.location}")

    def _adopt(self, source: DocumentSource) -> None:
        self.release()
        self._current = source
        logger.info(
            f"Active document source: {source.display_name} ({source.kind.value})",
            extra={"source": source.location}
        )
