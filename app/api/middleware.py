import logging
import time
from datetime import datetime, timezone

from fastapi import Request

logger = logging.getLogger("app.access")


async def log_requests(request: Request, call_next):
    """Emit one structured access record per request."""
    start_time = datetime.now(timezone.utc)
    started = time.perf_counter()

    response = await call_next(request)

    logger.info(
        "%s %s %s",
        request.method,
        request.url.path,
        response.status_code,
        extra={
            "status_code": response.status_code,
            "path": request.url.path,
            "method": request.method,
            "start_time": start_time.isoformat(),
            "remote_addr": request.client.host if request.client else None,
            "response_time_ms": round((time.perf_counter() - started) * 1000, 3),
        },
    )
    return response
