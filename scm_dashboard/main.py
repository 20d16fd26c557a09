# File: scm_dashboard/main.py
"""
Mock REST backend for the dashboard: the in-memory store behind the same
routes the HTTP data source calls.
"""
import os
import time
import logging
from typing import Callable, Optional

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from scm_dashboard.api.v1.api import api_router
from scm_dashboard.core.config import settings
from scm_dashboard.core.exceptions import ApiError
from scm_dashboard.db.database import MockDatabase
from scm_dashboard.services.validation import error_message, field_path

# Configure logging
logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
logger = logging.getLogger(__name__)


def error_body(error: str, message: str, status_code: int, **extra) -> dict:
    return {"error": error, "message": message, "status_code": status_code, **extra}


def create_app(db: Optional[MockDatabase] = None) -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        openapi_url=f"{settings.API_V1_STR}/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.db = db if db is not None else MockDatabase()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,  # must stay off with a wildcard origin
        allow_methods=["GET", "POST", "PUT", "PATCH", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Process-Time"],
        max_age=3600,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next: Callable) -> Response:
        """Log all requests with timing"""
        start_time = time.time()
        logger.info(f"🌐 {request.method} {request.url.path}")
        if request.query_params:
            logger.info(f"   🔍 Query: {dict(request.query_params)}")

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(
            f"✅ {request.method} {request.url.path} - "
            f"Status: {response.status_code} - "
            f"Time: {process_time:.4f}s"
        )
        response.headers["X-Process-Time"] = str(process_time)
        return response

    app.include_router(api_router, prefix=settings.API_V1_STR)

    @app.get("/")
    def read_root():
        return {
            "message": f"{settings.PROJECT_NAME} mock API",
            "environment": settings.ENVIRONMENT,
            "docs": "/docs",
        }

    @app.get("/health")
    def health_check():
        store = app.state.db
        return {
            "status": "healthy",
            "environment": settings.ENVIRONMENT,
            "records": {
                "inventory": len(store.inventory),
                "orders": len(store.orders),
                "suppliers": len(store.suppliers),
            },
        }

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        logger.warning(f"⚠️ {request.method} {request.url.path} - {exc.status_code}: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(type(exc).__name__, exc.message, exc.status_code),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = {}
        for error in exc.errors():
            loc = error["loc"][1:] if error["loc"] and error["loc"][0] == "body" else error["loc"]
            errors.setdefault(field_path(loc), error_message(error))
        message = next(iter(errors.values()), "Invalid request")
        return JSONResponse(
            status_code=422,
            content=error_body("Validation error", message, 422, errors=errors),
        )

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc: Exception):
        """Handle 404 errors"""
        return JSONResponse(
            status_code=404,
            content=error_body(
                "Not found", f"The requested resource {request.url.path} was not found", 404
            ),
        )

    @app.exception_handler(500)
    async def internal_error_handler(request: Request, exc: Exception):
        """Handle internal server errors"""
        logger.error(f"Internal server error: {str(exc)}")
        return JSONResponse(
            status_code=500,
            content=error_body("Internal server error", "Something went wrong on our end", 500),
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(
        "scm_dashboard.main:app",
        host="0.0.0.0",
        port=port,
        reload=settings.is_development,
    )
