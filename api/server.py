"""FastAPI server exposing the posts and validate endpoints."""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.config import Settings, settings
from api.handlers import get_post, validate
from api.logging_config import get_request_logger, get_server_logger, setup_logging
from api.models import ErrorResponse, PostResponse, ValidateResponse
from api.result import AppError, Err, ErrorKind, Ok, Result, ValidationError, fail

# Initialize logging
setup_logging(json_logs=settings.json_logs, log_level=settings.log_level)
log = get_server_logger()
req_log = get_request_logger()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Validation error"},
    500: {"model": ErrorResponse, "description": "Server error"},
}


def to_response(result: Result[BaseModel, AppError]) -> JSONResponse:
    """Translate a domain result into an HTTP response.

    Ok becomes a 200 with the serialized payload; Err becomes the error's
    status with an {"error": message} body.
    """
    match result:
        case Ok(value):
            return JSONResponse(status_code=200, content=value.model_dump(mode="json"))
        case Err(error):
            return JSONResponse(status_code=error.status, content=error.to_response())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and shutdown."""
    config: Settings = app.state.settings
    log.info("starting_server", host=config.host, port=config.port, public_url=config.public_url)
    yield
    log.info("shutting_down")


def register_error_handlers(app: FastAPI) -> None:
    """Map framework and unexpected errors onto the {"error": ...} shape."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        log.warning("request_validation_failed", path=request.url.path, errors=exc.errors())
        return to_response(fail(ValidationError()))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=str(exc.detail)).model_dump(),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        # Never leak internals; the traceback goes to the log only
        log.error("unhandled_exception", path=request.url.path, error=str(exc), exc_info=True)
        return to_response(fail(AppError(ErrorKind.INTERNAL)))


def drop_default_422(schema: dict) -> dict:
    """Remove FastAPI's 422 responses; validation failures are sent as 400."""
    for path_item in schema.get("paths", {}).values():
        for operation in path_item.values():
            operation.get("responses", {}).pop("422", None)
    components = schema.get("components", {}).get("schemas", {})
    components.pop("HTTPValidationError", None)
    components.pop("ValidationError", None)
    return schema


def create_app(config: Settings = settings) -> FastAPI:
    """Build the FastAPI application with routes, handlers and middleware."""
    app = FastAPI(
        title="Posts Playground API",
        version="1.0.0",
        description="FastAPI + pydantic playground with OpenAPI",
        servers=[{"url": config.public_url, "description": "Local"}],
        openapi_url="/openapi",
        lifespan=lifespan,
    )
    app.state.settings = config
    register_error_handlers(app)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            req_log.info(
                "request",
                method=request.method,
                path=request.url.path,
                status=status,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )

    @app.get(
        "/posts",
        description="Get a post by ID",
        response_model=PostResponse,
        responses={
            404: {"model": ErrorResponse, "description": "Not Found"},
            **ERROR_RESPONSES,
        },
    )
    async def posts(id: str = Query(examples=["1"])):
        return to_response(await get_post(id))

    @app.get(
        "/validate",
        description="Validate age and email",
        response_model=ValidateResponse,
        responses=ERROR_RESPONSES,
    )
    async def validate_query(
        age: int = Query(examples=[25]),
        email: str = Query(examples=["foo@example.com"]),
    ):
        return to_response(await validate(age, email))

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "ok"}

    default_openapi = app.openapi

    def openapi() -> dict:
        if app.openapi_schema is None:
            app.openapi_schema = drop_default_422(default_openapi())
        return app.openapi_schema

    app.openapi = openapi  # type: ignore[method-assign]

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    log.info("starting_uvicorn", host=settings.host, port=settings.port)
    uvicorn.run(
        "api.server:app",
        host=settings.host,
        port=settings.port,
    )
