"""Value Objects and field rules shared across the catalog domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Mapping, Union

from catalog.domain.exceptions import ValidationError

MAX_NAME_LENGTH = 100
MAX_USAGE_NOTES_LENGTH = 300
MAX_DESCRIPTION_LENGTH = 500

# The only value kinds a dynamic property may hold.
PropertyValue = Union[str, int, float, bool]


class UnitType(Enum):
    LENGTH = "Length"
    WEIGHT = "Weight"
    VOLUME = "Volume"
    COUNT = "Count"

    @staticmethod
    def parse(text: str) -> UnitType:
        for member in UnitType:
            if text.strip().lower() in (member.value.lower(), member.name.lower()):
                return member
        allowed = ", ".join(m.value for m in UnitType)
        raise ValidationError(f"Unknown unit type {text!r} (expected one of: {allowed})")


# --- Field validation ---------------------------------------------------------


def require_name(name: str | None, what: str = "Name") -> str:
    """Return the stripped name or raise if it is blank or too long."""
    if name is not None and not isinstance(name, str):
        raise ValidationError(f"{what} must be text")
    if name is None or not name.strip():
        raise ValidationError(f"{what} is required")
    name = name.strip()
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(f"{what} cannot exceed {MAX_NAME_LENGTH} characters")
    return name


def optional_text(value: str | None, limit: int, what: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{what} must be text")
    if len(value) > limit:
        raise ValidationError(f"{what} cannot exceed {limit} characters")
    return value


def to_decimal(value: str | int | float | Decimal, what: str) -> Decimal:
    """Coerce numeric input to Decimal safely."""
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {what}: {value!r}")
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid {what}: {value!r}") from exc
    if not result.is_finite():
        raise ValidationError(f"Invalid {what}: {value!r}")
    return result


# --- Dynamic properties -------------------------------------------------------


def validate_dynamic_properties(
    raw: Mapping[str, object] | None,
) -> dict[str, PropertyValue]:
    """Validate a dynamic-property map.

    Keys must be non-blank strings; values must be str, int, float or
    bool. Nested structures and nulls are rejected rather than stored
    as opaque blobs.
    """
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise ValidationError("Dynamic properties must be a mapping")

    result: dict[str, PropertyValue] = {}
    for key, value in raw.items():
        if not isinstance(key, str) or not key.strip():
            raise ValidationError(f"Invalid dynamic property key: {key!r}")
        if not isinstance(value, (str, int, float, bool)):
            raise ValidationError(
                f"Dynamic property '{key}' has unsupported value type "
                f"{type(value).__name__}"
            )
        result[key] = value
    return result


def parse_property_value(text: str) -> PropertyValue:
    """Interpret a textual property value (e.g. from the command line)."""
    lowered = text.strip().lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return text
