"""Field-level validation rules for the Product resource.

Each rule is a pure check (``(data, params) -> list[FieldError]``) that
looks at one field and reports at most one error per failure mode.  The
price rules are independent of each other: a missing price fails the
numeric, empty and positive checks at once, so an empty create body
yields four errors.

The ``*_RULES`` tuples are the ordered chains wired into the views.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Mapping, Optional

from modules.core.validation import (
    BODY,
    PARAMS,
    FieldError,
    is_missing,
    lookup,
    params_only,
)
from modules.products.constants import (
    MSG_AVAILABILITY_INVALID,
    MSG_INVALID_ID,
    MSG_NAME_EMPTY,
    MSG_NAME_TOO_LONG,
    NAME_MAX_LENGTH,
    MSG_PRICE_EMPTY,
    MSG_PRICE_INVALID,
    MSG_PRICE_NOT_NUMERIC,
    PRICE_MAX,
)

_INT_RE = re.compile(r"^[+-]?(0|[1-9][0-9]*)$")
_NUMERIC_RE = re.compile(r"^[+-]?([0-9]*\.)?[0-9]+$")

_TRUE_STRINGS = {"true", "1"}
_FALSE_STRINGS = {"false", "0"}

# Router kwarg carrying the ``<id>`` path segment.
ID_PARAM = "pk"


# ---------------------------------------------------------------------------
# Coercion helpers
# ---------------------------------------------------------------------------


def to_decimal(value: Any) -> Optional[Decimal]:
    """Parse a JSON number or numeric string; ``None`` if not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        candidate = str(value)
    elif isinstance(value, str) and _NUMERIC_RE.match(value):
        candidate = value
    else:
        return None
    try:
        number = Decimal(candidate)
    except InvalidOperation:
        return None
    return number if number.is_finite() else None


def to_price(value: Any) -> Optional[Decimal]:
    """Parse and round a price to cents; ``None`` outside ``(0, PRICE_MAX]``."""
    number = to_decimal(value)
    if number is None or number <= 0 or number > PRICE_MAX:
        return None
    cents = number.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return cents if cents > 0 else None


def to_bool(value: Any) -> Optional[bool]:
    """Parse a JSON boolean or one of ``"true"/"false"/"1"/"0"``."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        if value in _TRUE_STRINGS:
            return True
        if value in _FALSE_STRINGS:
            return False
    return None


def to_int(value: Any) -> Optional[int]:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and _INT_RE.match(value):
        return int(value)
    return None


def _is_empty(value: Any) -> bool:
    return is_missing(value) or value == ""


def _is_blank_text(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _error(msg: str, name: str, value: Any, location: str = BODY) -> FieldError:
    if is_missing(value):
        return FieldError(msg=msg, path=name, location=location)
    return FieldError(msg=msg, path=name, location=location, value=value)


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


@params_only
def check_id(data: Mapping[str, Any], params: Mapping[str, Any]) -> list[FieldError]:
    value = lookup(params, ID_PARAM)
    if to_int(value) is None:
        return [_error(MSG_INVALID_ID, "id", value, location=PARAMS)]
    return []


def check_name(data: Mapping[str, Any], params: Mapping[str, Any]) -> list[FieldError]:
    value = lookup(data, "name")
    if _is_blank_text(value):
        return [_error(MSG_NAME_EMPTY, "name", value)]
    if len(value) > NAME_MAX_LENGTH:
        return [_error(MSG_NAME_TOO_LONG, "name", value)]
    return []


def check_price_numeric(
    data: Mapping[str, Any], params: Mapping[str, Any]
) -> list[FieldError]:
    value = lookup(data, "price")
    if to_decimal(value) is None:
        return [_error(MSG_PRICE_NOT_NUMERIC, "price", value)]
    return []


def check_price_present(
    data: Mapping[str, Any], params: Mapping[str, Any]
) -> list[FieldError]:
    value = lookup(data, "price")
    if _is_empty(value):
        return [_error(MSG_PRICE_EMPTY, "price", value)]
    return []


def check_price_positive(
    data: Mapping[str, Any], params: Mapping[str, Any]
) -> list[FieldError]:
    value = lookup(data, "price")
    if to_price(value) is None:
        return [_error(MSG_PRICE_INVALID, "price", value)]
    return []


def check_availability(
    data: Mapping[str, Any], params: Mapping[str, Any]
) -> list[FieldError]:
    value = lookup(data, "availability")
    if to_bool(value) is None:
        return [_error(MSG_AVAILABILITY_INVALID, "availability", value)]
    return []


# ---------------------------------------------------------------------------
# Chains per operation (declaration order = report order)
# ---------------------------------------------------------------------------

PRICE_RULES = (check_price_numeric, check_price_present, check_price_positive)

ID_RULES = (check_id,)
CREATE_RULES = (check_name, *PRICE_RULES)
REPLACE_RULES = (check_id, check_name, *PRICE_RULES, check_availability)
