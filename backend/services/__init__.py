"""Services for the Resume Q&A Viewer."""
from .pdf_engine import PdfEngine, PdfHandle, DocumentLoadError, PageTextError, PageRenderError
from .source_resolver import SourceResolver
from .text_extractor import TextExtractor, ExtractionError
from .page_renderer import PageRenderer
from .chat_client import ChatClient, ChatError, ChatClientError
from .view_coordinator import ViewCoordinator

__all__ = ['PdfEngine', 'PdfHandle', 'DocumentLoadError', 'PageTextError', 'PageRenderError', 'SourceResolver', 'TextExtractor', 'ExtractionError', 'PageRenderer', 'ChatClient', 'ChatError', 'ChatClientError', 'ViewCoordinator']
