import pytest

from controllers.animal_list_controller import AnimalListController

ANIMALS = [
    {"id": 1, "name": "rex", "categoryName": "Dogs", "birthday": "2020-01-01"},
    {"id": 2, "name": "Bella", "category": "Cats"},
    {"id": 3, "name": "Archie", "categoryName": "Dogs", "birthday": "2023-01-01"},
]


@pytest.fixture
def controller(session, animal_service, catalog_service, state):
    return AnimalListController(
        session, animal_service, catalog_service, state=state, uploads_base_url="http://files.test/",
    )


def test_load_sorts_by_name(api, controller):
    api.add("GET", "/animals", json_body=ANIMALS)

    result = controller.load()

    assert result.success
    assert [a.name for a in controller.animals] == ["Archie", "Bella", "rex"]
    assert controller.is_loaded()


def test_load_fills_missing_age_descriptions(api, controller):
    api.add("GET", "/animals", json_body=[{"id": 2, "name": "Bella"}])
    controller.load()
    assert controller.animals[0].age_description == "Unknown"


def test_filters_become_the_query(api, controller):
    api.add("GET", "/animals", json_body=[])
    controller.set_query("golden retriever")
    controller.set_category(3)
    controller.set_only_available(True)

    controller.apply_filters()

    assert api.requests[0].url.query == b"q=golden%20retriever&categoryId=3&adopted=false"


def test_clear_filters_is_idempotent(api, controller):
    api.add("GET", "/animals", json_body=[])
    controller.set_size("LARGE")
    controller.set_sort("age", "desc")

    controller.clear_filters()
    controller.clear_filters()

    first, second = api.requests
    assert str(first.url) == str(second.url)
    assert first.url.query == b""
    assert controller.filters.is_default()


def test_failed_load_keeps_previous_list(api, controller):
    api.add("GET", "/animals", json_body=ANIMALS)
    api.add("GET", "/animals", status=500)
    controller.load()

    result = controller.load()

    assert not result.success
    assert len(controller.animals) == 3
    assert "HTTP 500" in controller.messages[-1].text


def test_empty_result_is_success(api, controller):
    api.add("GET", "/animals", json_body=[])
    result = controller.load()
    assert result.success
    assert result.items == []
    assert controller.messages == []


def test_set_sort_does_not_call_the_api(api, controller):
    api.add("GET", "/animals", json_body=ANIMALS)
    controller.load()

    controller.set_sort("category", "asc")
    assert [a.display_category for a in controller.animals] == ["Cats", "Dogs", "Dogs"]
    controller.set_sort("name", "desc")
    assert [a.name for a in controller.animals] == ["rex", "Bella", "Archie"]
    assert len(api.requests) == 1


def test_categories_and_names(api, controller):
    api.add("GET", "/categories", json_body=[{"id": 2, "name": "Dogs"}, {"id": 1, "name": "Cats"}])

    assert controller.load_categories().success
    assert api.requests[0].url.query == b"active=true"
    assert [c.name for c in controller.categories] == ["Cats", "Dogs"]
    assert controller.category_name(2) == "Dogs"
    assert controller.category_name(99) == ""


def test_resolve_image(controller):
    assert controller.resolve_image("/uploads/rex.png") == "http://files.test/uploads/rex.png"
    assert controller.resolve_image("https://cdn.test/rex.png") == "https://cdn.test/rex.png"
    assert controller.resolve_image("  ") is None
