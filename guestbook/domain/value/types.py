"""Domain value types for the guestbook.

Presence codes are small flags describing a guest's attendance intent:

- Comments: 0 = no answer, 1 = attending, 2 = not attending
- RSVPs: 1 = attending, 2 = not attending

They are stored as given and never checked against those values.
"""

import math
from typing import Any, Optional, Union

from pydantic import StrictBool, StrictFloat, StrictInt, StrictStr

# Any JSON scalar; strict types so values round-trip unchanged
Presence = Union[StrictBool, StrictInt, StrictFloat, StrictStr, None]

DEFAULT_PRESENCE = 0
DEFAULT_GUESTS = 1

# Largest value the guests column (32-bit INTEGER) can hold
MAX_GUESTS = 2**31 - 1


def clean_text(value: Any) -> Optional[str]:
    """Return the trimmed string, or None if it is not a non-blank string."""
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def is_presence(value: Any) -> bool:
    """Check that a presence code is a JSON scalar."""
    return value is None or isinstance(value, (bool, int, float, str))


def coerce_guests(value: Any) -> int:
    """Normalize a guest count to a positive integer.

    Numbers and numeric strings are truncated to an integer. Anything
    missing, non-numeric, non-finite, below one or above MAX_GUESTS falls
    back to DEFAULT_GUESTS.

    Examples:
        >>> coerce_guests(3)
        3
        >>> coerce_guests("2")
        2
        >>> coerce_guests(-5)
        1
        >>> coerce_guests(None)
        1
    """
    if value is None or isinstance(value, bool):
        return DEFAULT_GUESTS

    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return DEFAULT_GUESTS

    if not isinstance(value, (int, float)):
        return DEFAULT_GUESTS
    if isinstance(value, float) and not math.isfinite(value):
        return DEFAULT_GUESTS

    guests = int(value)
    return guests if 1 <= guests <= MAX_GUESTS else DEFAULT_GUESTS
