"""Input validation helpers."""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Type, TypeVar

from talent_compass.core.exceptions import InvalidRatingError, InvalidRecordError

E = TypeVar("E", bound=Enum)

VALID_RATINGS = (1, 2, 3)
_INTEGER_TEXT = re.compile(r"^[+-]?\d+$")


def require_non_empty(value: str, field: str = "value") -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidRecordError(
            error_code="EMPTY_FIELD",
            message=f"{field} must not be empty",
            details={"field": field},
        )
    return value.strip()


def require_rating(value: Any, field: str = "rating") -> int:
    """Return ``value`` as an int in {1, 2, 3} or raise ``InvalidRatingError``.

    Integer-valued text (``"2"``) is accepted because form input arrives as
    strings; booleans, floats and anything outside the range are rejected.
    """

    rating: Any = value
    if isinstance(value, str) and _INTEGER_TEXT.match(value.strip()):
        rating = int(value.strip())
    if isinstance(rating, bool) or not isinstance(rating, int) or rating not in VALID_RATINGS:
        raise InvalidRatingError(
            error_code="INVALID_RATING",
            message=f"{field} must be one of {list(VALID_RATINGS)}",
            details={"field": field, "value": repr(value)},
        )
    return int(rating)


def coerce_enum(enum_cls: Type[E], value: Any, field: str = "value") -> E:
    """Resolve ``value`` (a member or its value) to a member of ``enum_cls``."""

    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError as exc:
        raise InvalidRecordError(
            error_code="INVALID_ENUM_VALUE",
            message=f"{field} must be one of {[member.value for member in enum_cls]}",
            details={"field": field, "value": repr(value)},
        ) from exc
