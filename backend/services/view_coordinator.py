"""View state coordinator wiring user actions to the services."""
import logging
from typing import Any, Dict, Optional

from config import (
    DEFAULT_LANGUAGE,
    DEFAULT_SCALE,
    MAX_SCALE,
    MIN_SCALE,
    SCALE_STEP,
    MODEL_LABEL,
    PROFILE_EMAIL,
    PROFILE_NAME,
    PROFILE_PHONE,
)
from models.conversation import Turn, ViewState
from models.document import DocumentSource
from models.locale import Language, UIString, strings_for, system_prompt, translate
from services.chat_client import ChatClient, ChatClientError
from services.page_renderer import LoadSupersededError, PageRenderer
from services.pdf_engine import DocumentLoadError, PdfEngine
from services.source_resolver import SourceResolver
from services.text_extractor import ExtractionError, TextExtractor

logger = logging.getLogger(__name__)


class ViewCoordinator:
    """Owns the view state; every transition is a method on this class."""

    def __init__(
        self,
        resolver: Optional[SourceResolver] = None,
        renderer: Optional[PageRenderer] = None,
        extractor: Optional[TextExtractor] = None,
        chat_client: Optional[ChatClient] = None,
        language: Optional[Language] = None,
        scale: float = DEFAULT_SCALE
    ):
        engine = PdfEngine()
        self.resolver = resolver or SourceResolver()
        self.renderer = renderer or PageRenderer(engine)
        self.extractor = extractor or TextExtractor(engine)
        self.chat_client = chat_client or ChatClient()
        self.state = ViewState(
            scale=self._clamp(scale),
            language=language or Language(DEFAULT_LANGUAGE)
        )
        # Bumped on every source switch; stale load, text and answer results are dropped
        self._generation = 0

    # Document source

    def initialize(self) -> DocumentSource:
        """Adopt the bundled default resume."""
        self.renderer.close()
        source = self.resolver.use_default()
        self._reset_document(source)
        return source

    def select_file(self, filename: str, data: bytes) -> DocumentSource:
        """
        Adopt an uploaded file.

        Extracted text, answer and page count are cleared immediately, before
        the new document is loaded.
        """
        self.renderer.close()
        source = self.resolver.select_upload(filename, data)
        self._reset_document(source)
        return source

    def _reset_document(self, source: DocumentSource) -> None:
        self._generation += 1
        self.state.source = source
        self.state.page_count = 0
        self.state.extracted_text = ""
        self.state.load_error = None
        self.state.turn.answer = ""

    async def load_document(self) -> bool:
        """
        Load the active source, report its page count and extract its text.

        Returns:
            True if the text of the active source was stored
        """
        source = self.state.source
        if source is None:
            return False
        generation = self._generation

        try:
            page_count = await self.renderer.load(source)
        except LoadSupersededError:
            logger.info(f"Discarding load of replaced source {source.display_name}")
            return False
        except DocumentLoadError as e:
            logger.error(f"Document load failed: {e}", extra={"source": source.location})
            if generation == self._generation:
                self.state.load_error = UIString.LOAD_ERROR
            return False

        if generation != self._generation:
            logger.info(f"Discarding load of replaced source {source.display_name}")
            return False
        self.state.page_count = page_count

        try:
            text = await self.extractor.extract(source, page_count)
        except (DocumentLoadError, ExtractionError) as e:
            logger.error(f"Text extraction failed: {e}", extra={"source": source.location})
            if generation == self._generation:
                self.state.load_error = UIString.EXTRACTION_ERROR
            return False

        if generation != self._generation:
            logger.info(f"Discarding text of replaced source {source.display_name}")
            return False

        self.state.extracted_text = text
        return True

    async def render_page(self, page_number: int) -> bytes:
        """Render a page of the loaded document at the current zoom."""
        return await self.renderer.render(page_number, self.state.scale)

    # Zoom

    @staticmethod
    def _clamp(scale: float) -> float:
        return round(min(MAX_SCALE, max(MIN_SCALE, scale)), 2)

    def zoom_in(self) -> float:
        self.state.scale = self._clamp(self.state.scale + SCALE_STEP)
        return self.state.scale

    def zoom_out(self) -> float:
        self.state.scale = self._clamp(self.state.scale - SCALE_STEP)
        return self.state.scale

    # Language

    def toggle_language(self) -> Language:
        return self.set_language(self.state.language.toggled())

    def set_language(self, language: Language) -> Language:
        self.state.language = language
        logger.debug(f"Language set to {language.value}")
        return language

    def text(self, key: UIString) -> str:
        """Display string for ``key`` in the current language."""
        return translate(self.state.language, key)

    # Conversation turn

    def set_question(self, question: str) -> None:
        self.state.turn.question = question

    def can_submit(self) -> bool:
        turn = self.state.turn
        return (
            not turn.is_loading
            and bool(self.state.extracted_text)
            and bool(turn.question.strip())
        )

    async def submit(self) -> bool:
        """
        Send the current question to the chat endpoint.

        Returns:
            False if the submission was rejected and no request was issued
        """
        if not self.can_submit():
            logger.debug("Submission rejected: no text, blank question or request in flight")
            return False

        turn: Turn = self.state.turn
        turn.is_loading = True
        language = self.state.language
        generation = self._generation
        try:
            answer = await self.chat_client.ask(
                system_prompt(language),
                self.state.extracted_text,
                turn.question
            )
        except ChatClientError as e:
            logger.error(f"Question failed: {e.error.code}")
            answer = translate(language, UIString.ERROR)
        finally:
            turn.is_loading = False

        # An answer about a replaced document is never shown
        if generation != self._generation:
            logger.info("Discarding answer for a replaced source")
        else:
            turn.answer = answer
        return True

    async def handle_key(self, key: str, shift: bool = False) -> bool:
        """
        Handle a key pressed in the question box.

        Enter submits; Shift+Enter inserts a newline instead. No cursor
        position is tracked, so the newline is always appended to the end
        of the question.

        Returns:
            True if a question was submitted
        """
        if key != "Enter":
            return False
        if shift:
            self.state.turn.question += "\n"
            return False
        return await self.submit()

    # Presentation

    def snapshot(self) -> Dict[str, Any]:
        """Return everything a client needs to draw the viewer."""
        state = self.state
        source = state.source
        return {
            "language": state.language,
            "strings": strings_for(state.language),
            "source": (
                {"kind": source.kind.value, "display_name": source.display_name}
                if source else None
            ),
            "page_count": state.page_count,
            "scale": state.scale,
            "zoom_percent": round(state.scale * 100),
            "has_text": bool(state.extracted_text),
            "text_length": len(state.extracted_text),
            "load_error": self.text(state.load_error) if state.load_error else None,
            "question": state.turn.question,
            "answer": state.turn.answer,
            "is_loading": state.turn.is_loading,
            "can_submit": self.can_submit(),
            "profile": {
                "name": PROFILE_NAME,
                "email": PROFILE_EMAIL,
                "phone": PROFILE_PHONE,
                "model": MODEL_LABEL,
            },
        }

    def close(self) -> None:
        """Release the open document and any temporary upload."""
        self.renderer.close()
        self.resolver.release()
