# studium/shared/middleware/__init__.py (async version)

from studium.shared.middleware.exception_middleware import AsyncExceptionMiddleware
from studium.shared.middleware.logging_middleware import AsyncRequestLoggingMiddleware

# Export all for easy imports
__all__ = [
    "AsyncExceptionMiddleware",
    "AsyncRequestLoggingMiddleware",
]
