from __future__ import annotations

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse

from hateoas_builder.core.errors import RepresentationError
from hateoas_builder.core.observability import log_event


async def representation_error_handler(
    request: Request, exc: RepresentationError
) -> JSONResponse:
    """Builder input errors are server misconfiguration, so always 500."""
    log_event(
        "representation_error",
        error_type=type(exc).__name__,
        path=request.url.path,
        status=500,
    )
    return JSONResponse(
        {"error": type(exc).__name__, "detail": str(exc)},
        status_code=500,
    )


EXCEPTION_HANDLERS = {RepresentationError: representation_error_handler}


def install_error_handlers(app: Starlette) -> None:
    for exc_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exc_class, handler)


__all__ = [
    "representation_error_handler",
    "install_error_handlers",
    "EXCEPTION_HANDLERS",
]
