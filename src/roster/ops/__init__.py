"""
Operations layer — the service layer shared by the API and the CLI.

- All functions accept ``OperationContext`` as first argument
- All functions return ``OperationResult[T]`` (never raise)
- All functions are transport-agnostic (no HTTP, no CLI knowledge)
- Write functions support ``dry_run`` mode for safe previews

Usage::

    from roster.ops import OperationContext
    from roster.ops.coaches import get_coach

    ctx = OperationContext(session=session)
    result = get_coach(ctx, 7)
"""

from roster.ops.context import OperationContext
from roster.ops.result import OperationError, OperationResult, PagedResult

__all__ = [
    "OperationContext",
    "OperationError",
    "OperationResult",
    "PagedResult",
]
