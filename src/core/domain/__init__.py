"""Domain models and pure rules.

The domain knows nothing about HTTP clients, files or the CLI: only the
request/response/record shapes and status classification.
"""

from core.domain.models import Repository, Request, Response, StatusClass
from core.domain.status import classify_status, validate_response

__all__ = [
    "Repository",
    "Request",
    "Response",
    "StatusClass",
    "classify_status",
    "validate_response",
]
