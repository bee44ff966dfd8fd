"""Validation helpers shared by promotion use cases."""

from datetime import datetime


def ensure_valid_window(start_date: datetime | None, end_date: datetime | None) -> None:
    """Ensure the promotion window is closed and ordered."""

    if start_date is None or end_date is None:
        raise ValueError("Promotion start and end dates are required")
    if end_date < start_date:
        raise ValueError("Promotion end date must not be before its start date")
