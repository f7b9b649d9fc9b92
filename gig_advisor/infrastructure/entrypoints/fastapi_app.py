"""
FastAPI entry point for the chat backend.

This module is the Composition Root: it loads configuration, wires the
infrastructure adapters and passes them to the application layer. create_app()
accepts an already-built AnswerQueryUseCase so tests can wire fakes.

Run locally:
    uvicorn gig_advisor.infrastructure.entrypoints.fastapi_app:app --reload --port 3000
or:
    gig-advisor-api
"""

import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

load_dotenv()

# ---------------------------------------------------------------------------
# Secret bootstrap: must run before Settings.from_env() reads GEMINI_API_KEY
# ---------------------------------------------------------------------------
_secret_id = os.environ.get("GEMINI_SECRET_ARN")
if _secret_id:
    from gig_advisor.infrastructure.secrets.secrets_manager_adapter import SecretsManagerAdapter
    SecretsManagerAdapter().load_into_env(_secret_id)

from gig_advisor.application.chat.graph import build_chat_graph  # noqa: E402
from gig_advisor.application.services.domain_classifier import KeywordDomainClassifier  # noqa: E402
from gig_advisor.application.services.finance_keywords import FINANCE_KEYWORDS  # noqa: E402
from gig_advisor.application.services.reference_data_resolver import ReferenceDataResolver  # noqa: E402
from gig_advisor.application.use_cases.answer_query import AnswerQueryUseCase  # noqa: E402
from gig_advisor.domain.ports.observability_port import IObservabilityHandler  # noqa: E402
from gig_advisor.infrastructure.config.settings import Settings, configure_logging  # noqa: E402
from gig_advisor.infrastructure.llm.gemini_adapter import GeminiCompletionClient  # noqa: E402
from gig_advisor.infrastructure.observability.langfuse_adapter import LangfuseObservabilityHandler  # noqa: E402

settings = Settings.from_env()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


class ChatRequest(BaseModel):
    query: Optional[str] = None


class ChatResponse(BaseModel):
    response: str


def build_use_case(
    settings: Settings,
    observability: Optional[IObservabilityHandler] = None,
) -> AnswerQueryUseCase:
    """Wire classifier, resolver and Gemini client into the chat graph."""
    completion = GeminiCompletionClient(
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        base_url=settings.gemini_base_url,
        timeout=settings.gemini_timeout_seconds,
    )
    graph = build_chat_graph(
        classifier=KeywordDomainClassifier(FINANCE_KEYWORDS),
        resolver=ReferenceDataResolver(),
        completion=completion,
    )
    return AnswerQueryUseCase(graph, observability)


def create_app(
    use_case: AnswerQueryUseCase,
    observability: Optional[IObservabilityHandler] = None,
    static_dir: Optional[str] = None,
) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if observability is not None:
            observability.flush()

    app = FastAPI(title="Gig Worker Finance Advisor API", lifespan=lifespan)

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Rejected malformed chat request: %s", exc.errors())
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.post("/api/chat", response_model=ChatResponse)
    async def chat(body: Optional[ChatRequest] = None):
        """Answer one query. External-service failures still come back as 200.

        An absent body is treated like `{}`.
        """
        if body is None or not body.query or not body.query.strip():
            return JSONResponse(status_code=400, content={"error": "Query is required"})
        try:
            answer = await use_case.execute(body.query)
        except Exception:
            logger.exception("Error processing request")
            return JSONResponse(status_code=500, content={"error": "Internal server error"})
        return ChatResponse(response=answer)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    # Mounted last so /api/* and /health take precedence over the catch-all.
    if static_dir and os.path.isdir(static_dir):
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")

    return app


# ---------------------------------------------------------------------------
# Composition Root: wire all dependencies once at startup
# ---------------------------------------------------------------------------
_observability = (
    LangfuseObservabilityHandler() if LangfuseObservabilityHandler.is_configured() else None
)
app = create_app(
    build_use_case(settings, _observability),
    observability=_observability,
    static_dir=settings.static_dir,
)


def main() -> None:
    import uvicorn

    logger.info("Gig Worker Finance Advisor running on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
