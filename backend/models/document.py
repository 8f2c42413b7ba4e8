"""Document data models."""
from dataclasses import dataclass
from enum import Enum
from typing import List


class SourceKind(str, Enum):
    """Where the active PDF came from."""
    DEFAULT = "default"
    UPLOADED = "uploaded"


@dataclass(frozen=True)
class DocumentSource:
    """Represents the currently active PDF."""
    kind: SourceKind
    location: str  # Filesystem path handed to the PDF engine
    display_name: str
    is_temporary: bool = False


@dataclass
class PageText:
    """Text content of a single page."""
    page_number: int  # 1-indexed
    fragments: List[str]

    @property
    def text(self) -> str:
        return " ".join(self.fragments)
