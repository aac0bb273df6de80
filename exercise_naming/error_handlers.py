from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from exercise_naming.utils.log import logger


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        {"status_code": exc.status_code, "message": exc.detail},
        status_code=exc.status_code,
        headers=exc.headers,
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}")

    return JSONResponse(
        {"status_code": 500, "message": "Internal server error"},
        status_code=500,
    )


def register_error_handlers(app: FastAPI) -> None:
    # Starlette's HTTPException also covers routing errors such as 404 and 405.
    # The handler is narrower than the Exception signature expects.
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)
