from datetime import date

from models import AnimalRecord
from services.animal_sorting import (
    age_in_days,
    describe_age,
    ensure_age_descriptions,
    sort_animals,
)

TODAY = date(2024, 6, 15)


def _names(animals):
    return [a.name for a in animals]


def test_sort_by_name_is_case_insensitive_with_missing_last():
    animals = [AnimalRecord(name="bella"), AnimalRecord(name=None), AnimalRecord(name="Archie")]
    assert _names(sort_animals(animals, "name", "asc")) == ["Archie", "bella", None]


def test_descending_inverts_the_comparison():
    animals = [AnimalRecord(name="bella"), AnimalRecord(name=None), AnimalRecord(name="Archie")]
    assert _names(sort_animals(animals, "name", "desc")) == [None, "bella", "Archie"]


def test_sort_by_category_uses_either_category_field():
    animals = [
        AnimalRecord(name="a", category="Rabbits"),
        AnimalRecord(name="b", category_name="cats"),
        AnimalRecord(name="c", category="Dogs"),
    ]
    assert _names(sort_animals(animals, "category", "asc")) == ["b", "c", "a"]


def test_sort_by_age_puts_unknown_birthday_last():
    animals = [
        AnimalRecord(name="unknown"),
        AnimalRecord(name="old", birthday=date(2015, 1, 1)),
        AnimalRecord(name="young", birthday=date(2024, 5, 1)),
    ]
    assert _names(sort_animals(animals, "age", "asc", today=TODAY)) == ["young", "old", "unknown"]
    assert _names(sort_animals(animals, "age", "desc", today=TODAY)) == ["unknown", "old", "young"]


def test_sort_returns_a_new_list():
    animals = [AnimalRecord(name="b"), AnimalRecord(name="a")]
    sort_animals(animals)
    assert _names(animals) == ["b", "a"]


def test_age_in_days():
    assert age_in_days(date(2022, 4, 10), TODAY) == 2 * 365 + 2 * 30 + 5
    assert age_in_days(None, TODAY) is None
    assert age_in_days(date(2030, 1, 1), TODAY) == 0


def test_describe_age():
    assert describe_age(date(2022, 6, 15), TODAY) == "2 years"
    assert describe_age(date(2023, 6, 14), TODAY) == "1 year"
    assert describe_age(date(2024, 3, 1), TODAY) == "3 months"
    assert describe_age(date(2024, 5, 15), TODAY) == "1 month"
    assert describe_age(date(2024, 6, 14), TODAY) == "1 day"
    assert describe_age(date(2024, 6, 5), TODAY) == "10 days"
    assert describe_age(None, TODAY) == "Unknown"


def test_age_borrows_days_from_previous_month():
    # Jan 31 -> Mar 1 (leap year): 1 month and 1 day
    assert age_in_days(date(2024, 1, 31), date(2024, 3, 1)) == 30 + 1


def test_ensure_age_descriptions_keeps_existing_text():
    animals = [
        AnimalRecord(name="a", age_description="about 3"),
        AnimalRecord(name="b", birthday=date(2024, 6, 5)),
        AnimalRecord(name="c", age_description="  "),
    ]
    ensure_age_descriptions(animals, TODAY)
    assert [a.age_description for a in animals] == ["about 3", "10 days", "Unknown"]
