"""Cell formatting helpers shared by the report variants."""

import math
from datetime import datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Mapping, Optional, Union

PLACEHOLDER = "—"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"

_FALSY_STRINGS = {"", "0", "false", "no", "off"}
_CENTS = Decimal("0.01")


def cell(value: Any) -> Union[str, int, float]:
    """
    Coerce a raw field value into a grid cell.

    Missing values become the placeholder; strings and numbers pass through;
    anything else is stringified.
    """
    if value is None:
        return PLACEHOLDER
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (str, int, float)):
        return value
    return str(value)


def field(row: Mapping[str, Any], name: str) -> Union[str, int, float]:
    """Read ``name`` from a row and coerce it with :func:`cell`."""
    return cell(row.get(name))


def to_number(value: Any) -> Optional[float]:
    """Return ``value`` as a finite float, or None when it is not numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def money(value: Any) -> str:
    """
    Format a monetary amount with two decimals, period separator, no grouping.

    Non-numeric or absent amounts format as "0.00".
    """
    number = to_number(value)
    if number is None:
        number = 0.0
    try:
        text = str(Decimal(repr(number)).quantize(_CENTS, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        # Beyond decimal context precision
        text = f"{number:.2f}"
    if text == "-0.00":
        return "0.00"
    return text


def is_active(value: Any) -> bool:
    """Truthiness of an ``activo`` flag as it arrives from the query layer."""
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip().lower() not in _FALSY_STRINGS
    if isinstance(value, (int, float)):
        return value != 0
    return bool(value)


def status_label(value: Any, inactive: str = "Baja") -> str:
    return "Activo" if is_active(value) else inactive


def format_timestamp(value: Union[datetime, str, None]) -> str:
    """Render a generation timestamp; None means now."""
    if value is None:
        value = datetime.now()
    if isinstance(value, datetime):
        return value.strftime(TIMESTAMP_FORMAT)
    return str(value)
