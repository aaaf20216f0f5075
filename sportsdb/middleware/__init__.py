"""HTTP middleware: timeout, request ID, correlation ID.

Applied in main app; order matters (last added = outermost).
"""

from sportsdb.middleware.correlation_id import CorrelationIDMiddleware
from sportsdb.middleware.request_id import RequestIDMiddleware
from sportsdb.middleware.timeout import TimeoutMiddleware

__all__ = [
    "CorrelationIDMiddleware",
    "RequestIDMiddleware",
    "TimeoutMiddleware",
]
