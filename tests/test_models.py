from datetime import date

import pytest

from models import (
    AdoptionRequestRecord,
    AnimalFilters,
    AnimalRecord,
    BreedRecord,
    CategoryRecord,
    LoginResponse,
    RequestStatus,
    UserRecord,
    can_transition,
    is_actionable,
    normalize_enum,
)
from models.filters import GENDER_OPTIONS, SIZE_OPTIONS, label_for
from services.animal_service import AnimalService


# ==========================================
# Transfer records
# ==========================================

def test_animal_record_uses_camel_case_on_the_wire():
    animal = AnimalRecord(id=1, name="Rex", category_id=2, owner_id=7, birthday=date(2021, 5, 4))
    assert animal.to_payload() == {
        "id": 1,
        "name": "Rex",
        "categoryId": 2,
        "adopted": False,
        "ownerId": 7,
        "birthday": "2021-05-04",
    }


def test_unknown_fields_are_ignored():
    animal = AnimalRecord.from_json('{"id": 3, "name": "Tom", "microchip": "X1", "breedName": "Tabby"}')
    assert animal.id == 3
    assert animal.display_breed == "Tabby"


@pytest.mark.parametrize("record", [
    UserRecord(id=1, full_name="Ana Lee", email="ana@example.com", phone_number="555", role="ROLE_USER"),
    CategoryRecord(id=2, name="Dogs", active=False, sort_order=1),
    BreedRecord(id=3, name="Beagle", category_id=2, category_name="Dogs", sort_order=4),
    AnimalRecord(
        id=4, name="Rex", category_id=2, breed_id=3, gender="MALE", size="MEDIUM",
        short_description="Friendly", adopted=True, image="/uploads/rex.png",
        owner_id=1, birthday=date(2020, 2, 29), age_description="4 years",
    ),
    AdoptionRequestRecord(
        id=5, animal_id=4, animal_name="Rex", requester_id=9, status="PENDING",
        note="We have a garden", created_at="2024-03-01T10:00:00",
    ),
    LoginResponse(token="abc", user=UserRecord(id=1, email="ana@example.com")),
])
def test_records_survive_a_json_round_trip(record):
    assert type(record).from_json(record.to_json()) == record


def test_display_category_prefers_category_field():
    assert AnimalRecord(category="Cats", category_name="Felines").display_category == "Cats"
    assert AnimalRecord(category_name="Felines").display_category == "Felines"


# ==========================================
# Filters
# ==========================================

def test_query_params_follow_fixed_order():
    filters = AnimalFilters(
        q="rex", category_id=3, gender="MALE", size="SMALL", age_group="BABY", only_available=True,
    )
    assert filters.to_query_params() == [
        ("q", "rex"),
        ("categoryId", "3"),
        ("gender", "MALE"),
        ("animalSize", "SMALL"),
        ("ageGroup", "BABY"),
        ("adopted", "false"),
    ]


def test_blank_and_default_filters_are_omitted():
    filters = AnimalFilters(q="   ", gender="", sort_by="age", sort_order="desc")
    assert filters.to_query_params() == []


def test_listing_url_encodes_spaces(client):
    url = AnimalService(client).listing_url(AnimalFilters(q="golden retriever", category_id=3))
    assert url == "/animals?q=golden%20retriever&categoryId=3"


def test_same_filters_give_same_url(client):
    service = AnimalService(client)
    assert service.listing_url(AnimalFilters(q="a b", size="LARGE")) == service.listing_url(
        AnimalFilters(q="a b", size="LARGE")
    )


def test_is_default():
    assert AnimalFilters().is_default()
    assert not AnimalFilters(only_available=True).is_default()


@pytest.mark.parametrize("raw, expected", [
    ("Male", "MALE"),
    (" medium ", "MEDIUM"),
    ("extra large", "EXTRA_LARGE"),
    (None, None),
])
def test_normalize_enum(raw, expected):
    assert normalize_enum(raw) == expected


def test_label_for():
    assert label_for(SIZE_OPTIONS, "extra large") == "Extra Large"
    assert label_for(GENDER_OPTIONS, "ROBOT") == "ROBOT"
    assert label_for(GENDER_OPTIONS, None) == ""


# ==========================================
# Request lifecycle
# ==========================================

@pytest.mark.parametrize("target", [RequestStatus.APPROVED, RequestStatus.REJECTED, RequestStatus.CANCELLED])
def test_pending_can_move_to_any_decision(target):
    assert can_transition("PENDING", target)
    assert can_transition("pending", target)


@pytest.mark.parametrize("current", ["APPROVED", "REJECTED", "CANCELLED", "UNKNOWN", None])
def test_resolved_and_unknown_statuses_are_terminal(current):
    for target in RequestStatus:
        assert not can_transition(current, target)
    assert not is_actionable(current)
