"""
HTTP API adapter for the design orchestrator.

Architectural role:
- Expose the single design-generation endpoint plus small discovery routes.
- Parse the JSON body and delegate everything else to
  `core.engine.DesignOrchestrator`.
- Convert every outcome to a JSON body: `DesignResponse` on success,
  `ErrorPayload` on failure.

Endpoint responsibilities:
- `POST /api/design`: parse body, run orchestration, return suggestions + URLs.
- `GET /api/styles`: list supported design styles for the form select.
- `GET /health`: liveness probe.

API request lifecycle (`POST /api/design`):
1. Reject with the configuration error when the credential is missing.
2. Parse request JSON; unparseable bodies -> HTTP 400.
3. Run the orchestrator in the threadpool (provider calls are blocking).
4. Map `DesignError` subclasses to their status codes.
5. Map anything else to HTTP 500 "An unexpected error occurred".

Error handling strategy:
- No exception escapes the endpoint; every path returns structured JSON.
- `details` carries diagnostic provider text and is logged server-side.

Side effects:
- Loads environment variables via `DesignerConfig.from_env()` when no
  orchestrator is injected.
- Emits request/response debug logs only when `DEBUG == "true"`.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from interior_designer.core.engine import DesignOrchestrator
from interior_designer.core.errors import DesignError, InvalidInputError, UnexpectedDesignError
from interior_designer.llm.provider_config import DESIGN_STYLES, DesignerConfig


logger = logging.getLogger(__name__)


def error_response(error: DesignError) -> JSONResponse:
    """Build the `ErrorPayload` response for a design failure."""
    return JSONResponse(status_code=error.status_code, content=error.to_payload())


def create_app(orchestrator: DesignOrchestrator | None = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        orchestrator: Pre-built orchestrator (tests inject fakes here). When
            omitted, one is wired to the real providers from the environment.
    """
    if orchestrator is None:
        orchestrator = DesignOrchestrator.from_config(DesignerConfig.from_env())

    debug = orchestrator.config.debug

    app = FastAPI(
        title="AI Interior Designer API",
        description="Room redesign suggestions and visualizations.",
        version="0.1.0",
    )
    app.state.orchestrator = orchestrator

    # ============================================================
    # Discovery
    # ============================================================

    @app.get("/api/styles")
    def list_styles():
        """Return supported design styles in display order."""
        return {"styles": list(DESIGN_STYLES)}

    @app.get("/health")
    def health_check():
        return {"status": "healthy"}

    # ============================================================
    # Design generation
    # ============================================================

    @app.post("/api/design")
    async def design(request: Request):
        """Generate design suggestions and a visualization for one room photo.

        Input validation behavior:
        - Missing credential -> HTTP 500 before the body is read.
        - Malformed JSON -> HTTP 400 "Invalid request body".
        - Missing image/style/description -> HTTP 400 (see engine).

        Error handling strategy:
        - `DesignError` -> its status code and payload.
        - Any other exception -> logged, HTTP 500 generic payload.
        """
        try:
            app.state.orchestrator.ensure_configured()
        except DesignError as err:
            return error_response(err)

        try:
            body = await request.json()
        except ValueError as err:
            return error_response(InvalidInputError("Invalid request body", details=str(err)))

        if debug:
            logger.debug(
                "Design request fields=%s",
                sorted(body) if isinstance(body, dict) else type(body).__name__,
            )

        try:
            result = await run_in_threadpool(app.state.orchestrator.generate_design, body)
        except DesignError as err:
            if err.details:
                logger.warning("Design request failed: %s (%s)", err.message, err.details)
            return error_response(err)
        except Exception:
            logger.exception("Unexpected error while generating design")
            return error_response(UnexpectedDesignError())

        payload = result.to_payload()

        if debug:
            logger.debug(
                "Design response suggestions_chars=%d images=%d",
                len(payload["designSuggestions"]),
                len(payload["generatedImageUrls"]),
            )

        return payload

    return app
