import time

from fastapi import Request

from snapcaption.utils.logger import get_logger

logger = get_logger(__name__)


async def log_requests_middleware(request: Request, call_next):
    """
    Log method, path, status and elapsed time for every request.
    Unhandled exceptions pass straight through; the app's exception handler logs them.
    """
    start = time.perf_counter()
    logger.debug("→ %s %s", request.method, request.url.path)
    response = await call_next(request)

    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info("← %s %s %d (%.1fms)", request.method, request.url.path, response.status_code, elapsed_ms)
    return response
