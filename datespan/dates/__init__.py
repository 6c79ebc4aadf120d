"""Calendar-aware date value type."""

from .coercion import DateLike, to_date
from .date import Date

__all__ = ["Date", "DateLike", "to_date"]
