"""Request and response models for the HTTP surface."""
from typing import Dict, Optional
from pydantic import BaseModel, Field

from .locale import Language


class QuestionRequest(BaseModel):
    """Body of PUT /question."""
    question: str = ""


class AskRequest(BaseModel):
    """Body of POST /ask. A provided question replaces the current one."""
    question: Optional[str] = None


class LanguageRequest(BaseModel):
    """Body of POST /language. Without a language the selection is toggled."""
    language: Optional[Language] = None


class KeyPressRequest(BaseModel):
    """A key pressed inside the question box."""
    key: str
    shift: bool = False


class SourceInfo(BaseModel):
    kind: str
    display_name: str


class ProfileInfo(BaseModel):
    name: str
    email: str
    phone: str
    model: str


class ViewStateResponse(BaseModel):
    """Everything a client needs to draw the viewer."""
    language: Language
    strings: Dict[str, str]
    source: Optional[SourceInfo] = None
    page_count: int = 0
    scale: float
    zoom_percent: int
    has_text: bool
    text_length: int = Field(0, description="Length of the extracted text")
    load_error: Optional[str] = None
    question: str = ""
    answer: str = ""
    is_loading: bool = False
    can_submit: bool = False
    profile: ProfileInfo
