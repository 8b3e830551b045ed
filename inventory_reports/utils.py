import math
import re
from typing import Any


def coerce_number(value: Any) -> Any:
    """
    Maps a missing or unparseable numeric value to 0.
    Anything that already looks like a number is passed through so the
    schema can still reject out-of-range values.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return 0 if isinstance(value, float) and math.isnan(value) else value
    if isinstance(value, str):
        value = value.strip().replace(",", "").lstrip("$")
        if not value:
            return 0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    return 0 if math.isnan(number) else number


def squash_label(value: str) -> str:
    """'In Stock', 'InStock' and 'in_stock' all squash to 'instock'."""
    return re.sub(r"[\s_\-]", "", str(value)).lower()


def format_value(value: Any) -> str:
    """Renders integral floats without a trailing '.0'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
