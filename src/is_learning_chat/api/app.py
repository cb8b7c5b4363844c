"""
FastAPI Application Module

Serves the IS Learning Chatbot: a single HTML page plus the completion proxy
that forwards one student question at a time to the hosted model.

Key Features:
- Stateless completion endpoint with hand-rolled input validation
- Generic error payloads that never leak provider detail
- Structured logging and Prometheus metrics
- CORS and OpenTelemetry support
"""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from prometheus_client import CollectorRegistry, Counter, generate_latest
from structlog import get_logger

from ..config import (
    CHAT_ENDPOINT_PATH,
    GENERATION_FAILED_ERROR,
    INVALID_MESSAGE_ERROR,
    get_cors_origins,
)
from ..domain.models import ChatResponse, ErrorResponse, Transcript
from ..services.llm import LLMService
from ..ui.render import render_page

STATIC_DIR = Path(__file__).resolve().parent.parent / "ui" / "static"

# Registry for isolated metric collection
CUSTOM_REGISTRY = CollectorRegistry()

REQUESTS = Counter("chat_requests_total", "Total completion requests", registry=CUSTOM_REGISTRY)
ERRORS = Counter("chat_errors_total", "Completion requests that failed upstream", registry=CUSTOM_REGISTRY)
INVALID = Counter("chat_invalid_requests_total", "Completion requests rejected as invalid", registry=CUSTOM_REGISTRY)

logger = get_logger()

llm_service = LLMService()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Logs startup/shutdown; the proxy holds no resources between requests"""
    logger.info("application_startup_complete", model=llm_service.model_name)
    yield
    logger.info("application_shutdown_complete")


def get_llm_service() -> LLMService:
    """Returns the language model service"""
    return llm_service


app = FastAPI(
    title="IS Learning Chatbot",
    description="Educational chat widget backed by a hosted LLM",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Set up request tracing
FastAPIInstrumentor.instrument_app(app)


@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    """Tracks requests"""
    logger.info("request_started", path=request.url.path, method=request.method)
    try:
        response = await call_next(request)
        logger.info("request_finished", path=request.url.path, status_code=response.status_code)
        return response
    except Exception as e:
        logger.error("request_failed", path=request.url.path, error=str(e))
        raise


async def _read_message(request: Request):
    """Returns the message string from the body, or None when it is unusable"""
    try:
        payload = await request.json()
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    message = payload.get("message")
    if not message or not isinstance(message, str):
        return None
    return message


@app.post(
    CHAT_ENDPOINT_PATH,
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat(
    request: Request,
    llm_service: LLMService = Depends(get_llm_service),
):
    """
    Answers one student question.
    Each call is independent; no history is sent or kept.
    """
    REQUESTS.inc()
    message = await _read_message(request)
    if message is None:
        INVALID.inc()
        logger.warning("chat_request_rejected", reason="invalid_message")
        return JSONResponse(status_code=400, content=ErrorResponse(error=INVALID_MESSAGE_ERROR).model_dump())

    try:
        text = await llm_service.generate_response(message)
    except Exception as e:
        ERRORS.inc()
        logger.error("chat_generation_error", error=str(e), error_type=type(e).__name__)
        return JSONResponse(status_code=500, content=ErrorResponse(error=GENERATION_FAILED_ERROR).model_dump())

    logger.info(
        "chat_response_sent",
        message_length=len(message),
        response_length=len(text),
    )
    return ChatResponse(response=text)


@app.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    """Serves the chat page with a fresh transcript"""
    return HTMLResponse(render_page(Transcript.seeded()))


@app.get("/static/chat.js")
async def chat_js() -> FileResponse:
    """Serves the browser shell for the chat page"""
    return FileResponse(STATIC_DIR / "chat.js", media_type="text/javascript")


@app.get("/health")
async def health(llm_service: LLMService = Depends(get_llm_service)):
    """Reports liveness and the configured model"""
    return {"status": "ok", "model": llm_service.model_name}


@app.get("/metrics")
async def metrics():
    """Provides Prometheus metrics for system monitoring"""
    return Response(generate_latest(CUSTOM_REGISTRY), media_type="text/plain")
