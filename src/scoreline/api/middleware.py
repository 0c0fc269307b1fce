import logging
import time
from uuid import uuid4

from fastapi import Request
from fastapi.responses import JSONResponse

from scoreline.config import settings

logger = logging.getLogger("scoreline.api")


async def add_request_id(request: Request, call_next):
    rid = request.headers.get("x-request-id") or uuid4().hex
    request.state.request_id = rid
    response = await call_next(request)
    response.headers["x-request-id"] = rid
    return response


def _declared_length(request: Request) -> int:
    try:
        return int(request.headers.get("content-length") or 0)
    except ValueError:
        return 0


async def enforce_body_size(request: Request, call_next):
    # Score batches for a whole table arrive in one POST; cap them.
    limit_kb = settings.security.max_body_kb
    if request.method == "POST" and _declared_length(request) > limit_kb * 1024:
        return JSONResponse(
            status_code=413,
            content={"error": "request_too_large", "detail": f"Max request size is {limit_kb}KB"},
        )
    return await call_next(request)


async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = None
    try:
        response = await call_next(request)
        return response
    finally:
        status = getattr(response, "status_code", 500)
        logger.log(
            logging.WARNING if status >= 500 else logging.INFO,
            "request",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status": status,
                "duration_ms": round((time.perf_counter() - start) * 1000, 2),
                "request_id": getattr(request.state, "request_id", None),
            },
        )
