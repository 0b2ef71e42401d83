"""
FastAPI Main Application
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from vendor_console.config import Settings, get_settings
from vendor_console.database import Database, StorageError
from vendor_console.models.init_data import init_default_data
from vendor_console.routers import auth, dashboard, departments, employees, projects, users

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error"
NOT_FOUND_MESSAGE = "Not found"


def _validation_message(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into one line"""
    parts = []
    for error in exc.errors():
        location = ".".join(str(loc) for loc in error.get("loc", ()) if loc != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else error.get("msg", ""))
    return "Invalid request: " + "; ".join(parts)


def register_exception_handlers(app: FastAPI) -> None:
    """Every error leaves the API as {"message": ...}"""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Unknown path or unknown method on a known path
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED or (
            exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found"
        ):
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"message": NOT_FOUND_MESSAGE},
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": _validation_message(exc)},
        )

    @app.exception_handler(StorageError)
    async def storage_exception_handler(request: Request, exc: StorageError):
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": GENERIC_ERROR_MESSAGE},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"{request.method} {request.url.path} raised {exc!r}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": GENERIC_ERROR_MESSAGE},
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application around an explicitly constructed storage handle

    Args:
        settings: Settings to use; defaults to the cached environment settings

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug
    )
    app.state.settings = settings
    app.state.database = Database(settings)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        try:
            response = await call_next(request)
        except Exception:
            logger.info(f"{request.method} {request.url.path} -> 500")
            raise
        logger.info(f"{request.method} {request.url.path} -> {response.status_code}")
        return response

    register_exception_handlers(app)

    # API routers (with /api prefix)
    app.include_router(auth.router, prefix="/api")
    app.include_router(departments.router, prefix="/api")
    app.include_router(employees.router, prefix="/api")
    app.include_router(projects.router, prefix="/api")
    app.include_router(users.router, prefix="/api")
    app.include_router(dashboard.router, prefix="/api")

    @app.on_event("startup")
    def startup_event():
        """Create tables and seed the bootstrap administrator"""
        database: Database = app.state.database
        database.create_all()
        init_default_data(database, settings)
        logger.info(f"{settings.app_name} v{settings.app_version} started")

    @app.on_event("shutdown")
    def shutdown_event():
        app.state.database.dispose()

    @app.get("/health")
    def health_check():
        """Health check endpoint, performs a storage round-trip"""
        app.state.database.ping()
        return {"status": "healthy", "version": settings.app_version}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("vendor_console.main:app", host="0.0.0.0", port=8000, reload=get_settings().debug)
