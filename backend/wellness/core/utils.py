"""
Utility functions for the application.
"""
from typing import Any, Dict, Union
from datetime import date, datetime


def serialize_date(obj: Any) -> str:
    """Serialize date objects to ISO format strings."""
    if isinstance(obj, (date, datetime)):
        return obj.isoformat()
    raise TypeError(f"Type {type(obj)} not serializable")


def format_date_iso(value: Union[date, datetime]) -> str:
    """Format a date or datetime as a calendar date key (YYYY-MM-DD)."""
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def format_error(message: str, details: Any = None) -> Dict[str, Any]:
    """Format error response."""
    response = {"error": message}
    if details:
        response["details"] = details
    return response
