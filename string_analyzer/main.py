from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Optional
import logging

from string_analyzer import config
from string_analyzer.api.routes import router
from string_analyzer.errors import InvalidTypeError, MissingFieldError, StringAnalyzerError
from string_analyzer.schemas import HealthResponse
from string_analyzer.store import StringStore

# Configure logging
logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
logger = logging.getLogger(__name__)


def validation_error(exc: RequestValidationError) -> StringAnalyzerError:
    """Map a request validation failure onto one of the API error kinds"""
    for error in exc.errors():
        loc = tuple(error.get("loc", ()))
        if loc == ("body", "value") and error.get("type") != "missing":
            return InvalidTypeError()

    for error in exc.errors():
        if tuple(error.get("loc", ()))[:1] == ("body",):
            return MissingFieldError("Invalid request body or missing 'value' field")

    details = ", ".join(str(error["loc"][-1]) for error in exc.errors() if error.get("loc"))
    return StringAnalyzerError(f"Invalid query parameter values or types: {details}")


def register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(StringAnalyzerError)
    async def string_analyzer_exception_handler(request: Request, exc: StringAnalyzerError):
        logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    # Validation error handler
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        error = validation_error(exc)
        logger.warning(f"{request.method} {request.url.path} -> {error.status_code}: {exc.errors()}")
        return JSONResponse(status_code=error.status_code, content={"error": error.message})

    # HTTPException handler
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    # Generic error handler
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {str(exc)}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


def create_app(store: Optional[StringStore] = None) -> FastAPI:
    """Build the API around a string store (a fresh one unless given)."""
    app = FastAPI(
        title=config.APP_NAME,
        description="Analyze and store string properties",
        version=config.APP_VERSION,
    )
    app.state.store = store if store is not None else StringStore()

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(router, tags=["strings"])

    @app.on_event("startup")
    def on_startup():
        logger.info(f"✅ {config.APP_NAME} v{config.APP_VERSION} ready with {len(app.state.store)} strings")

    @app.on_event("shutdown")
    def on_shutdown():
        logger.info(f"Discarding {len(app.state.store)} stored strings")
        app.state.store.clear()

    # Root endpoint
    @app.get("/")
    def root():
        return {
            "message": config.APP_NAME,
            "version": config.APP_VERSION,
            "endpoints": {
                "POST /strings": "Analyze and store a string",
                "GET /strings/{string_value}": "Get specific string analysis",
                "GET /strings": "Get all strings with optional filters",
                "GET /strings/filter-by-natural-language": "Filter using natural language",
                "DELETE /strings/{string_value}": "Delete a string",
                "GET /docs": "API documentation",
            },
        }

    @app.get("/health", response_model=HealthResponse)
    def health_check():
        """Health check endpoint"""
        return HealthResponse(status="healthy", records=len(app.state.store))

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("string_analyzer.main:app", host=config.HOST, port=config.PORT, reload=config.RELOAD)
