"""HTTP middleware: timeout, request ID, correlation ID.

Applied in create_app; order matters (last added = outermost).
"""

from community_search.middleware.correlation_id import CorrelationIDMiddleware
from community_search.middleware.request_id import RequestIDMiddleware
from community_search.middleware.timeout import TimeoutMiddleware

__all__ = [
    "CorrelationIDMiddleware",
    "RequestIDMiddleware",
    "TimeoutMiddleware",
]
