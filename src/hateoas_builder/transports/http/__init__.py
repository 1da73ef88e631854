from .errors import EXCEPTION_HANDLERS, install_error_handlers, representation_error_handler
from .responses import HypermediaResponse, representation_response

__all__ = [
    "HypermediaResponse",
    "representation_response",
    "representation_error_handler",
    "install_error_handlers",
    "EXCEPTION_HANDLERS",
]
