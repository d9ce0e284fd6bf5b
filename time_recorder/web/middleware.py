"""Request middlewares: structured access logging and the 404 fallback."""

from __future__ import annotations

import logging
import time

from aiohttp import web

from ..constants import MSG_NOT_FOUND

access_logger = logging.getLogger("time_recorder.access")


@web.middleware
async def access_log_middleware(request: web.Request, handler) -> web.StreamResponse:
    """Log method, path, status, and duration of every request."""
    start = time.perf_counter()
    status = 500
    try:
        response = await handler(request)
        status = response.status
        return response
    except web.HTTPException as e:
        status = e.status
        raise
    finally:
        duration = time.perf_counter() - start
        access_logger.info(
            "access method=%s path=%s status=%s duration=%.6fs",
            request.method,
            request.path,
            status,
            duration,
            extra={
                "method": request.method,
                "path": request.path,
                "status": status,
                "duration": duration,
            },
        )


@web.middleware
async def not_found_middleware(request: web.Request, handler) -> web.StreamResponse:
    try:
        return await handler(request)
    except web.HTTPNotFound:
        return web.Response(status=404, text=MSG_NOT_FOUND)
