"""Host wiring for FastAPI applications.

    registry = CheckRegistry()
    registry.register("string", "required", lambda value, params: bool(value))

    app = create_app(registry)

or, for an existing app:

    setup_validation(app, registry)
"""
from fastapi import FastAPI

from checkchain.checks.registry import CheckRegistry, default_registry
from checkchain.core.config import Settings, get_settings
from checkchain.core.errors import register_error_handlers
from checkchain.core.logging import configure_logging, get_logger
from checkchain.core.middleware import RequestLoggingMiddleware

log = get_logger(__name__)


def setup_validation(
    app: FastAPI,
    registry: CheckRegistry | None = None,
    *,
    logger=None,
    settings: Settings | None = None,
) -> FastAPI:
    """Attach a check registry, validation settings and the error handlers to an app."""
    app.state.check_registry = registry if registry is not None else default_registry
    app.state.validation_logger = logger
    app.state.validation_settings = settings
    if not getattr(app.state, "validation_handlers_registered", False):
        register_error_handlers(app)
        app.state.validation_handlers_registered = True
    log.debug("validation_installed", checks=len(app.state.check_registry))
    return app


def create_app(
    registry: CheckRegistry | None = None,
    *,
    settings: Settings | None = None,
    logger=None,
) -> FastAPI:
    settings = settings if settings is not None else get_settings()
    configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

    app = FastAPI(title=settings.SERVICE_NAME)
    app.add_middleware(RequestLoggingMiddleware)
    setup_validation(app, registry, logger=logger, settings=settings)

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app
