import logging
import time
from typing import Callable

from fastapi import Request

logger = logging.getLogger(__name__)


async def request_logging_middleware(request: Request, call_next: Callable):
    """Log all requests for monitoring"""
    start_time = time.time()

    response = await call_next(request)

    duration = time.time() - start_time
    logger.info(f"[{request.method}] {request.url.path} - {response.status_code} - {duration:.3f}s")

    return response
