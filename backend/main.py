"""Main entry point for the Resume Q&A Viewer API."""
import logging
from typing import Optional
from fastapi import Body, FastAPI, File, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from config import CORS_ORIGINS, LOG_FORMAT, LOG_LEVEL, PORT
from logger import setup_logging
from models.api import (
    AskRequest,
    KeyPressRequest,
    LanguageRequest,
    QuestionRequest,
    ViewStateResponse,
)
from services.pdf_engine import PageRenderError
from services.view_coordinator import ViewCoordinator

# Initialize logging
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Resume Q&A Viewer",
    description="PDF resume viewer with a question-answering chat panel",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialized on startup
coordinator: Optional[ViewCoordinator] = None


@app.on_event("startup")
async def startup_event():
    """Create the coordinator and load the default resume."""
    global coordinator

    if LOG_FORMAT == "json":
        setup_logging(LOG_LEVEL)

    logger.info("Initializing Resume Q&A Viewer...")
    coordinator = ViewCoordinator()
    coordinator.initialize()
    await coordinator.load_document()
    logger.info("Resume Q&A Viewer ready")


@app.on_event("shutdown")
async def shutdown_event():
    """Release the open document and temporary uploads."""
    if coordinator is not None:
        coordinator.close()


def _state() -> ViewStateResponse:
    return ViewStateResponse(**coordinator.snapshot())


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "message": "Resume Q&A Viewer API"}


@app.get("/health")
async def health():
    """Detailed health check."""
    return {
        "status": "healthy",
        "service": "resume-qa-viewer",
        "version": "1.0.0"
    }


@app.get("/state", response_model=ViewStateResponse)
async def get_state() -> ViewStateResponse:
    return _state()


@app.post("/document", response_model=ViewStateResponse)
async def upload_document(file: UploadFile = File(...)) -> ViewStateResponse:
    """
    Select an uploaded PDF as the active document.

    Text and answer are cleared as soon as the file is selected; the new
    document is then loaded and its text extracted. Load failures are
    reported through ``load_error`` in the returned state.
    """
    filename = file.filename or ""
    if not filename.lower().endswith(".pdf"):
        raise HTTPException(status_code=400, detail="Only PDF files are accepted")

    data = await file.read()
    coordinator.select_file(filename, data)
    await coordinator.load_document()
    return _state()


@app.post("/document/default", response_model=ViewStateResponse)
async def use_default_document() -> ViewStateResponse:
    """Switch back to the bundled resume."""
    coordinator.initialize()
    await coordinator.load_document()
    return _state()


@app.get("/pages/{page_number}")
async def get_page(page_number: int) -> Response:
    """Render one page as PNG at the current zoom scale."""
    if coordinator.state.page_count == 0:
        raise HTTPException(status_code=409, detail="No document loaded")
    if not 1 <= page_number <= coordinator.state.page_count:
        raise HTTPException(status_code=404, detail=f"Page {page_number} not found")

    try:
        image = await coordinator.render_page(page_number)
    except PageRenderError as e:
        logger.error(f"Page render failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
    return Response(content=image, media_type="image/png")


@app.post("/zoom/in", response_model=ViewStateResponse)
async def zoom_in() -> ViewStateResponse:
    coordinator.zoom_in()
    return _state()


@app.post("/zoom/out", response_model=ViewStateResponse)
async def zoom_out() -> ViewStateResponse:
    coordinator.zoom_out()
    return _state()


@app.post("/language", response_model=ViewStateResponse)
async def change_language(request: Optional[LanguageRequest] = Body(None)) -> ViewStateResponse:
    """Toggle the language, or select one when given."""
    if request is not None and request.language is not None:
        coordinator.set_language(request.language)
    else:
        coordinator.toggle_language()
    return _state()


@app.put("/question", response_model=ViewStateResponse)
async def set_question(request: QuestionRequest) -> ViewStateResponse:
    coordinator.set_question(request.question)
    return _state()


@app.post("/ask", response_model=ViewStateResponse)
async def ask(request: Optional[AskRequest] = Body(None)) -> ViewStateResponse:
    """
    Submit the current question.

    Raises:
        HTTPException: 409 when there is no extracted text, the question is
            blank or a previous question is still being answered
    """
    if request is not None and request.question is not None:
        if coordinator.state.turn.is_loading:
            raise HTTPException(status_code=409, detail="A question is already being answered")
        coordinator.set_question(request.question)

    if not await coordinator.submit():
        raise HTTPException(status_code=409, detail="Question cannot be submitted now")
    return _state()


@app.post("/keypress", response_model=ViewStateResponse)
async def keypress(request: KeyPressRequest) -> ViewStateResponse:
    """Forward a key pressed in the question box."""
    await coordinator.handle_key(request.key, request.shift)
    return _state()


if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting Resume Q&A Viewer API on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
