"""Shared validation utilities"""

import re
from datetime import datetime
from typing import Optional


def validate_email(email: Optional[str]) -> Optional[str]:
    """
    Validate email format.

    Args:
        email: Email address string

    Returns:
        Lowercase email address

    Raises:
        ValueError: If email format is invalid
    """
    if not email:
        return email

    email = email.strip().lower()

    # Basic email validation pattern
    email_pattern = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"

    if not re.match(email_pattern, email):
        raise ValueError("Invalid email format")

    return email


def validate_date_range(
    start: Optional[datetime], end: Optional[datetime], label: str = "date range"
) -> None:
    """
    Reject a range whose end precedes its start.

    Only checked when both ends are present; a half-open range is accepted.

    Raises:
        ValueError: If end is earlier than start
    """
    if start is None or end is None:
        return

    # Mixed naive/aware values are compared on their wall-clock time
    if (start.tzinfo is None) != (end.tzinfo is None):
        start = start.replace(tzinfo=None)
        end = end.replace(tzinfo=None)

    if end < start:
        raise ValueError(f"Invalid {label}: end must not be before start")


def reject_null(value):
    """
    Refuse an explicit null for a column the database requires.

    Update bodies leave such fields optional so they can be omitted,
    but sending ``null`` must fail validation rather than reach the database.

    Raises:
        ValueError: If value is None
    """
    if value is None:
        raise ValueError("Field may be omitted but not set to null")
    return value
