"""
Output formatting for movie records.
"""

from typing import Any, Mapping, TypeVar

from pydantic import BaseModel

RecordT = TypeVar("RecordT", bound=BaseModel)


def format_currency(value: int | float | None) -> str:
    """
    Format a number as US dollars, e.g. 1500000 -> '$1,500,000.00'.

    A missing value formats as '$0.00'; negative values keep the sign in
    front of the symbol ('-$2,500.50').
    """
    amount = float(value or 0)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_movie_budget(record: BaseModel | Mapping[str, Any], target: type[RecordT]) -> RecordT:
    """
    Build a `target` record from `record` with its budget formatted.

    Args:
        record: A record or a result row mapping carrying a numeric `budget`
        target: Record type whose `budget` field is a string

    Returns:
        Instance of `target`
    """
    data = record.model_dump() if isinstance(record, BaseModel) else dict(record)
    data["budget"] = format_currency(data.get("budget"))
    return target.model_validate(data)
