"""Request validation pipeline.

Validation is modelled as an explicit accumulator: each *check* is a pure
function that inspects the request body and path parameters and returns
zero or more ``FieldError`` entries.  ``run_checks`` folds an ordered chain
of checks into a single error list (every check runs, none short-circuits),
and ``validate_request`` is the gate that turns a non-empty list into a
terminal ``400`` response before the view action is reached.

Views declare their chain next to the action::

    @validate_request(check_id, check_name, check_price_numeric)
    def update(self, request, pk=None): ...
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Mapping

import structlog
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

logger = structlog.get_logger(__name__)

BODY = "body"
PARAMS = "params"

_MISSING = object()


@dataclass(frozen=True)
class FieldError:
    """A single failed rule for one field."""

    msg: str
    path: str
    location: str = BODY
    value: Any = field(default=_MISSING)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": "field",
            "msg": self.msg,
            "path": self.path,
            "location": self.location,
        }
        if self.value is not _MISSING:
            data["value"] = self.value
        return data


Check = Callable[[Mapping[str, Any], Mapping[str, Any]], List[FieldError]]


def lookup(source: Mapping[str, Any], name: str) -> Any:
    """Return ``source[name]``, or a sentinel when the key is absent."""
    return source.get(name, _MISSING)


def is_missing(value: Any) -> bool:
    return value is _MISSING or value is None


def params_only(check: Check) -> Check:
    """Mark a check that never looks at the request body."""
    check.reads_body = False  # type: ignore[attr-defined]
    return check


def reads_body(checks: Iterable[Check]) -> bool:
    return any(getattr(check, "reads_body", True) for check in checks)


def run_checks(
    checks: Iterable[Check],
    data: Mapping[str, Any],
    params: Mapping[str, Any],
) -> list[FieldError]:
    """Run every check in order and concatenate their errors."""
    errors: list[FieldError] = []
    for check in checks:
        errors.extend(check(data, params))
    return errors


def validation_error_response(errors: Iterable[FieldError]) -> Response:
    return Response(
        {"errors": [error.to_dict() for error in errors]},
        status=status.HTTP_400_BAD_REQUEST,
    )


def validate_request(*checks: Check):
    """Gate a view action behind an ordered chain of checks.

    The decorated action only runs when the chain yields no errors;
    otherwise the request terminates with ``400 {"errors": [...]}``.
    The body is only parsed when some check in the chain reads it, so
    chains built from ``params_only`` checks accept any payload.
    """
    needs_body = reads_body(checks)

    def decorator(view_method):
        @functools.wraps(view_method)
        def wrapper(self, request: Request, *args, **kwargs):
            data: Mapping[str, Any] = {}
            if needs_body and isinstance(request.data, Mapping):
                data = request.data
            errors = run_checks(checks, data, kwargs)
            if errors:
                logger.info(
                    "request.validation_failed",
                    action=view_method.__name__,
                    error_count=len(errors),
                    fields=[error.path for error in errors],
                )
                return validation_error_response(errors)
            return view_method(self, request, *args, **kwargs)

        return wrapper

    return decorator
