"""Conversation and view state data models."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .document import DocumentSource
from .locale import Language, UIString


class TurnStatus(str, Enum):
    """Lifecycle of a conversation turn."""
    IDLE = "idle"
    SUBMITTING = "submitting"


@dataclass
class Turn:
    """Represents the current question/answer exchange."""
    question: str = ""
    answer: str = ""
    is_loading: bool = False

    @property
    def status(self) -> TurnStatus:
        return TurnStatus.SUBMITTING if self.is_loading else TurnStatus.IDLE


@dataclass
class ViewState:
    """All mutable state of the viewer, owned by the coordinator."""
    scale: float
    language: Language
    source: Optional[DocumentSource] = None
    page_count: int = 0
    extracted_text: str = ""
    load_error: Optional[UIString] = None
    turn: Turn = field(default_factory=Turn)
