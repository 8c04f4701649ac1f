"""
REST API layer for roster.

Provides a FastAPI application factory with typed endpoints that
delegate to the operations layer (``roster.ops``).  This package handles
only HTTP transport concerns: serialisation, error mapping, and request
context.

Quick start::

    from roster.api import create_app

    app = create_app()  # ready for uvicorn
"""

from roster.api.app import create_app

__all__ = ["create_app"]
