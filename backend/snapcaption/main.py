import logging
import sys
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from snapcaption.config.settings import settings
from snapcaption.errors import InvalidRequestError, SnapCaptionError
from snapcaption.middleware.request_logging import log_requests_middleware
from snapcaption.routes.caption_routes import router as caption_router
from snapcaption.routes.place_routes import router as place_router
from snapcaption.templates import INDEX_HTML
from snapcaption.utils.logger import get_logger


def _configure_logging() -> None:
    """Root logger to stdout as `time | level | module:line | message`."""
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(log_level)
    # Avoid duplicate handlers if create_app() is called more than once (e.g. tests)
    if not root.handlers:
        root.addHandler(handler)
    else:
        for h in root.handlers:
            h.setFormatter(formatter)

    # Quiet down noisy third-party loggers unless we're in DEBUG mode
    if log_level > logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)
        logging.getLogger("openai").setLevel(logging.WARNING)
        logging.getLogger("PIL").setLevel(logging.WARNING)


def validation_message(exc: RequestValidationError) -> str:
    """First validation problem as one line, e.g. "name: String should have at most 200 characters"."""
    errors = exc.errors()
    if not errors:
        return InvalidRequestError.message
    first = errors[0]
    # loc looks like ("body", "name") or ("body", 12) for a JSON decode offset.
    field = ".".join(
        str(part) for part in first.get("loc", ()) if part != "body" and not isinstance(part, int)
    )
    msg = first.get("msg", "invalid value")
    return f"{field}: {msg}" if field else f"Invalid request body: {msg}"


def create_app() -> FastAPI:
    _configure_logging()

    logger = get_logger(__name__)
    logger.info(
        "Starting SnapCaption backend — log_level=%s, caption_model=%s",
        settings.log_level.upper(),
        settings.caption_model,
    )

    app = FastAPI(title="SnapCaption Backend", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests_middleware)
    logger.debug("CORS and request-logging middleware registered.")

    @app.exception_handler(SnapCaptionError)
    async def snapcaption_error_handler(request: Request, exc: SnapCaptionError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s — %s: %s", request.method, request.url.path, type(exc).__name__, exc.message)
        else:
            logger.warning("%s %s — %s: %s", request.method, request.url.path, type(exc).__name__, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return await snapcaption_error_handler(request, InvalidRequestError(validation_message(exc)))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

    @app.get("/", response_class=HTMLResponse)
    def index() -> HTMLResponse:
        return HTMLResponse(content=INDEX_HTML)

    app.include_router(caption_router)
    logger.info("Caption router mounted at /api.")

    app.include_router(place_router)
    logger.info("Place-info router mounted at /api.")

    return app


app = create_app()
