import logging
import traceback
from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskflow.adapter.services.database import create_engine, create_schema, create_session_factory
from taskflow.adapter.services.search_indexer import LoggingSearchIndexer
from taskflow.app.services.background import BackgroundDispatcher
from taskflow.app.services.password_hasher import PasswordHasher
from taskflow.app.services.token_service import TokenService

from .error import ClientError, ServerError
from .middleware.request_id import RequestIDMiddleware, get_request_id
from .utils.log_config import configure_logging

logger = logging.getLogger(__name__)


def _envelope(request: Request, code: str, message: str, status_code: int) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "status_code": status_code,
            "request_id": get_request_id(request),
        }
    }


async def handle_client_error(request: Request, exc: ClientError):
    body = _envelope(request, exc.base_error.code, exc.base_error.message, exc.status_code)
    logger.warning(f"Client error: {body['error']}")
    return JSONResponse(status_code=exc.status_code, content=body)


async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    try:
        code = HTTPStatus(exc.status_code).phrase.upper().replace(" ", "_").replace("-", "_")
    except ValueError:
        code = "HTTP_ERROR"
    body = _envelope(request, code, str(exc.detail), exc.status_code)
    logger.warning(f"HTTP error: {body['error']}")
    return JSONResponse(status_code=exc.status_code, content=body, headers=exc.headers)


async def handle_validation_error(request: Request, exc: RequestValidationError):
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    body = _envelope(
        request, "VALIDATION_ERROR", details or "Invalid request", status.HTTP_400_BAD_REQUEST
    )
    logger.warning(f"Validation error: {body['error']}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body)


def _server_error_response(request: Request, code: str, exc: Exception) -> JSONResponse:
    body = _envelope(
        request, code, "Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    if request.app.state.config.ENVIRONMENT != "production":
        body["error"]["stack"] = "".join(traceback.format_exception(exc))
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body)


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.code}: {exc.base_error.message}")
    return _server_error_response(request, exc.base_error.code, exc)


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return _server_error_response(request, "INTERNAL_ERROR", exc)


def create_app(ApplicationConfig, session_factory=None) -> FastAPI:
    """
    Build the application and every shared service it depends on.

    Raises:
        ConfigurationError: JWT secret missing or too short outside test mode
    """
    configure_logging(ApplicationConfig.LOG_LEVEL)

    token_service = TokenService.from_config(ApplicationConfig)

    engine = None
    if session_factory is None and ApplicationConfig.DB_URI:
        engine = create_engine(ApplicationConfig.DB_URI)
        session_factory = create_session_factory(engine)

    dispatcher = BackgroundDispatcher()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if engine is not None and ApplicationConfig.ENVIRONMENT != "production":
            await create_schema(engine)
        logger.info("Application startup complete")
        yield
        await dispatcher.drain()
        if engine is not None:
            await engine.dispose()
        logger.info("Application shut down")

    app = FastAPI(title="Taskflow API", version="0.1.0", lifespan=lifespan)

    app.state.config = ApplicationConfig
    app.state.token_service = token_service
    app.state.password_hasher = PasswordHasher()
    app.state.session_factory = session_factory
    app.state.dispatcher = dispatcher
    app.state.search_indexer = LoggingSearchIndexer()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware)

    from taskflow.api.routes import auth, health, users, workspaces

    app.include_router(health.router, tags=["Health"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(users.router, tags=["User"])
    app.include_router(workspaces.router, tags=["Workspace"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
