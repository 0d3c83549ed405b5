import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn as uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from src.commonUtils.emailUtil import BrevoEmailClient
from src.config.settings import ConfigurationError, Settings, check_required_settings, get_settings
from src.routes import contactRoute, healthRoute

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unknown paths and wrong methods on known paths both count as "not found"
    if exc.status_code in (404, 405):
        return _error(404, "Endpoint not found")
    return _error(exc.status_code, str(exc.detail))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Malformed request body on {request.url.path}: {exc.errors()}")
    return _error(400, "Invalid request body")


async def global_exception_handler(request: Request, exc: Exception):
    """Last-resort handler: log everything, expose nothing"""
    logger.error(f"Unexpected error on {request.url.path}: {str(exc)}", exc_info=True)
    return _error(500, "Internal server error")


def load_settings_or_exit(settings: Optional[Settings] = None) -> Settings:
    """Refuse to start without the Brevo credentials and addresses."""
    try:
        return check_required_settings(settings or get_settings())
    except ValidationError as e:
        logger.error(f"❌ Invalid environment variables: {e}")
        sys.exit(1)
    except ConfigurationError as e:
        logger.error(f"❌ {e}")
        sys.exit(1)


def create_app(settings: Optional[Settings] = None,
               email_client: Optional[BrevoEmailClient] = None) -> FastAPI:
    settings = load_settings_or_exit(settings)
    logging.getLogger().setLevel(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"🚀 Server running on http://localhost:{settings.PORT}")
        logger.info(f"📧 Email endpoint: POST http://localhost:{settings.PORT}/api/send-email")
        yield

    app = FastAPI(
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
    )

    app.state.settings = settings
    app.state.email_client = email_client or BrevoEmailClient(
        api_key=settings.BREVO_API_KEY,
        endpoint=settings.BREVO_API_ENDPOINT,
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    app.include_router(healthRoute.router, tags=['health'], prefix='/api')
    app.include_router(contactRoute.router, tags=['contact'], prefix='/api')

    return app


def run():
    settings = load_settings_or_exit()
    uvicorn.run("src.main:create_app", factory=True, host=settings.HOST, port=settings.PORT,
                log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
