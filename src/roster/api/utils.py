"""
Shared API router utilities.

- ``_dc()`` — convert an ops response dataclass (or dict) to a plain dict
- ``_handle_error()`` — convert a failed OperationResult to a ``problem_response``
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from fastapi import Request

from roster.api.middleware.errors import problem_response, status_for_error_code
from roster.ops.result import OperationResult


def _dc(obj: Any) -> dict[str, Any]:
    """Convert a dataclass (or dict) to a plain dict.

    Returns an empty dict for objects that are neither dataclasses nor dicts.
    """
    if hasattr(obj, "__dataclass_fields__"):
        return asdict(obj)
    return obj if isinstance(obj, dict) else {}


def _handle_error(result: OperationResult, request: Request | None = None):
    """Convert a failed ``OperationResult`` into a Problem Details response.

    The error code picks the HTTP status, the message becomes the title and
    the error details (e.g. the rejected ``entity``) are passed through.
    """
    error = result.error
    code = error.code if error else "INTERNAL"
    return problem_response(
        status=status_for_error_code(code),
        title=error.message if error else "Operation failed",
        instance=str(request.url) if request is not None else "",
        details=dict(error.details) if error else None,
    )
