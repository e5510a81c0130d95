"""FastAPI dependencies.

    @router.post("/users")
    async def create_user(validation: RequestValidationSession = Depends(get_validation)):
        validation.check_body("email").string("required").string("email")
        await validation.validate_all()
"""
from fastapi import Request

from checkchain.checks.registry import default_registry
from checkchain.validation import RequestSources, RequestValidationSession


async def get_validation(request: Request) -> RequestValidationSession:
    """The request's validation session, created on first use and kept on `request.state`."""
    session = getattr(request.state, "validation", None)
    if session is None:
        registry = getattr(request.app.state, "check_registry", None)
        if registry is None:
            registry = default_registry
        session = RequestValidationSession(
            registry.get,
            logger=getattr(request.app.state, "validation_logger", None),
            sources=await RequestSources.from_request(request),
            settings=getattr(request.app.state, "validation_settings", None),
        )
        request.state.validation = session
    return session
