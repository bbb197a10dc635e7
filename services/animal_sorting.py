"""
Local sorting and age formatting for animal listings.

The API returns animals unordered; the listing page sorts them here so a
sort change never costs a request.
"""

from calendar import monthrange
from datetime import date
from functools import cmp_to_key
from typing import Callable, Optional

from models import AnimalRecord
from models.filters import SortDirection, SortKey


def age_in_days(birthday: Optional[date], today: Optional[date] = None) -> Optional[int]:
    """
    Approximate age in days: years*365 + months*30 + days.

    Returns None for an unknown birthday; birthdays in the future count as 0.
    """
    if birthday is None:
        return None
    today = today or date.today()
    if birthday >= today:
        return 0
    years, months, days = _calendar_difference(birthday, today)
    return years * 365 + months * 30 + days


def _calendar_difference(start: date, end: date) -> tuple[int, int, int]:
    """Whole years, months and days between two dates (start <= end)."""
    total_months = (end.year - start.year) * 12 + end.month - start.month
    days = end.day - start.day
    if total_months > 0 and days < 0:
        total_months -= 1
        # Count the remaining days from start shifted by whole months
        days = (end - _add_months(start, total_months)).days
    return total_months // 12, total_months % 12, days


def _add_months(value: date, months: int) -> date:
    """Shift by whole months, clamping to the last day of the target month."""
    index = value.month - 1 + months
    year, month = value.year + index // 12, index % 12 + 1
    return date(year, month, min(value.day, monthrange(year, month)[1]))


def describe_age(birthday: Optional[date], today: Optional[date] = None) -> str:
    """Human age using the largest non-zero unit: "2 years", "1 month", "5 days"."""
    if birthday is None:
        return "Unknown"
    today = today or date.today()
    if birthday >= today:
        return "0 days"
    years, months, days = _calendar_difference(birthday, today)
    if years > 0:
        return f"{years} year{'s' if years != 1 else ''}"
    if months > 0:
        return f"{months} month{'s' if months != 1 else ''}"
    return f"{days} day{'s' if days != 1 else ''}"


def _compare_text(a: Optional[str], b: Optional[str]) -> int:
    if a is None and b is None:
        return 0
    if a is None:
        return 1
    if b is None:
        return -1
    a, b = a.casefold(), b.casefold()
    return (a > b) - (a < b)


def _compare_numbers(a: Optional[int], b: Optional[int]) -> int:
    if a is None and b is None:
        return 0
    if a is None:
        return 1
    if b is None:
        return -1
    return (a > b) - (a < b)


def _comparator(sort_by: str, today: date) -> Callable[[AnimalRecord, AnimalRecord], int]:
    if sort_by == SortKey.CATEGORY.value:
        return lambda a, b: _compare_text(a.display_category, b.display_category)
    if sort_by == SortKey.AGE.value:
        return lambda a, b: _compare_numbers(
            age_in_days(a.birthday, today), age_in_days(b.birthday, today)
        )
    return lambda a, b: _compare_text(a.name, b.name)


def sort_animals(
    animals: list[AnimalRecord],
    sort_by: str = SortKey.NAME.value,
    sort_order: str = SortDirection.ASC.value,
    today: Optional[date] = None,
) -> list[AnimalRecord]:
    """
    Return a sorted copy of animals.

    Missing values sort last in ascending order. Descending order inverts the
    whole comparison, so missing values come first there.
    """
    base = _comparator(sort_by, today or date.today())
    if sort_order == SortDirection.DESC.value:
        compare = lambda a, b: -base(a, b)  # noqa: E731
    else:
        compare = base
    return sorted(animals, key=cmp_to_key(compare))


def ensure_age_descriptions(animals: list[AnimalRecord], today: Optional[date] = None) -> None:
    """Fill in age_description from the birthday where the API left it blank."""
    for animal in animals:
        if not (animal.age_description or "").strip():
            animal.age_description = describe_age(animal.birthday, today)
