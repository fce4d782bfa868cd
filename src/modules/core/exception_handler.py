"""Project-wide DRF exception handler.

- ``APIException`` (malformed JSON, unsupported method or media type)
  keeps DRF's status code and is rendered in the plural envelope
  ``{"errors": [{"msg": ...}]}``.
- ``DatabaseError`` (store unreachable, constraint rejected) is logged and
  answered with ``500 {"error": "Error interno del servidor"}`` instead of
  dropping the response.
- Anything else is left to Django (re-raised by DRF).
"""

from __future__ import annotations

from typing import Any, Optional

import structlog
from django.db import DatabaseError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)

MSG_INTERNAL_ERROR = "Error interno del servidor"


def _flatten(detail: Any) -> list[str]:
    if isinstance(detail, dict):
        return [msg for value in detail.values() for msg in _flatten(value)]
    if isinstance(detail, list):
        return [msg for value in detail for msg in _flatten(value)]
    return [str(detail)]


def api_exception_handler(exc: Exception, context: dict) -> Optional[Response]:
    view = context.get("view")
    view_name = type(view).__name__ if view is not None else None

    if isinstance(exc, DatabaseError):
        logger.error(
            "unhandled_database_error",
            view=view_name,
            error=str(exc),
            exc_info=exc,
        )
        return Response(
            {"error": MSG_INTERNAL_ERROR},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    response = exception_handler(exc, context)
    if response is None:
        return None

    response.data = {"errors": [{"msg": msg} for msg in _flatten(response.data)]}
    logger.warning(
        "api_error",
        view=view_name,
        status_code=response.status_code,
        error_type=type(exc).__name__,
    )
    return response
