"""Translate storefront errors into JSON responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from storefront.errors import ApiError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("request_failed", path=request.url.path, status_code=exc.status_code, message=exc.message)
    else:
        logger.info("request_rejected", path=request.url.path, status_code=exc.status_code, message=exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def register_api_error_handler(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
