"""Data models for the Resume Q&A Viewer."""
from .document import DocumentSource, PageText, SourceKind
from .locale import Language, UIString
from .conversation import Turn, TurnStatus, ViewState
from .api import (
    AskRequest,
    KeyPressRequest,
    LanguageRequest,
    ProfileInfo,
    QuestionRequest,
    SourceInfo,
    ViewStateResponse,
)

__all__ = [
    "DocumentSource",
    "PageText",
    "SourceKind",
    "Language",
    "UIString",
    "Turn",
    "TurnStatus",
    "ViewState",
    "AskRequest",
    "KeyPressRequest",
    "LanguageRequest",
    "ProfileInfo",
    "QuestionRequest",
    "SourceInfo",
    "ViewStateResponse",
]
