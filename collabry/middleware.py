

import logging
import time
from typing import Callable

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class ExceptionMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except HTTPException as exc:
            logger.warning("%s %s -> %s %s", request.method, request.url.path,
                           exc.status_code, exc.detail)
            return JSONResponse(
                status_code=exc.status_code,
                content={"detail": exc.detail}
            )
        except Exception as exc:
            logger.exception("%s %s failed", request.method, request.url.path)
            return JSONResponse(
                status_code=500,
                content={"detail": f"{exc}"}
            )
        logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path,
                    response.status_code, (time.perf_counter() - start_time) * 1000)
        return response
