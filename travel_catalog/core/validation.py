"""Booking form validation.

``validate_booking`` returns a mapping of field name to error message for
every failing field; an empty mapping means the form is valid.
"""

from __future__ import annotations

import re
from dataclasses import asdict
from typing import Any, Dict, Mapping, Optional, Union

from ..domain.models import BookingRequest

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
NAME_MIN_LENGTH = 2

NAME_ERROR = "Enter your full name"
EMAIL_ERROR = "Enter a valid email"
TRAVELLERS_ERROR = "At least 1 traveller"


def is_valid_email(email: Optional[str]) -> bool:
    if not isinstance(email, str):
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


def parse_travellers(value: Any) -> Optional[int]:
    """Coerce a travellers field to int, or None if it is not a whole number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def validate_booking(
    fields: Union[Mapping[str, Any], BookingRequest],
    max_travellers: Optional[int] = None,
) -> Dict[str, str]:
    """Validate booking form fields.

    Args:
        fields: Mapping with ``name``, ``email`` and ``travellers`` keys,
            or a BookingRequest.
        max_travellers: Optional upper bound on the traveller count.

    Returns:
        Field name to error message for each failing field.
    """
    if isinstance(fields, BookingRequest):
        fields = asdict(fields)

    errors: Dict[str, str] = {}

    name = fields.get("name")
    if not isinstance(name, str) or len(name.strip()) < NAME_MIN_LENGTH:
        errors["name"] = NAME_ERROR

    if not is_valid_email(fields.get("email")):
        errors["email"] = EMAIL_ERROR

    travellers = parse_travellers(fields.get("travellers"))
    if travellers is None or travellers < 1:
        errors["travellers"] = TRAVELLERS_ERROR
    elif max_travellers is not None and travellers > max_travellers:
        errors["travellers"] = f"At most {max_travellers} travellers"

    return errors
