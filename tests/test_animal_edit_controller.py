from datetime import date

import pytest

from controllers.animal_edit_controller import AnimalEditController
from controllers.base import FLASH_KEY, Page
from services.api_client import FilePart

CATEGORIES = [{"id": 1, "name": "Dogs"}, {"id": 2, "name": "Cats"}]
BREEDS = [{"id": 10, "name": "Beagle", "categoryId": 1}, {"id": 11, "name": "Poodle", "categoryId": 1}]


@pytest.fixture
def controller(logged_in, animal_service, catalog_service, state):
    return AnimalEditController(logged_in, animal_service, catalog_service, state=state)


def _fill(controller):
    controller.update_form(
        name=" Rex ",
        gender="male",
        size="extra large",
        birthday=date(2021, 3, 4),
        short_description="Friendly",
        long_description="Very friendly",
    )
    controller.form.category_id = 1
    controller.form.breed_id = 10


def test_new_animal_is_posted_as_multipart(api, controller, state):
    api.add("POST", "/animals", status=201, json_body={"id": 5, "name": "Rex"})
    _fill(controller)

    target = controller.submit(FilePart(filename="rex.jpg", content=b"jpeg", content_type="image/jpeg"))

    assert target == Page.MY_ANIMALS
    request = api.requests[0]
    assert request.headers["Authorization"] == "Bearer token-7"
    assert b'name="animal"' in request.content
    assert b'"name": "Rex"' in request.content
    assert b'"size": "EXTRA_LARGE"' in request.content
    assert b'name="image"; filename="rex.jpg"' in request.content
    assert [m.text for m in state[FLASH_KEY]] == ["Animal added successfully!"]
    assert controller.form.name is None


def test_payload_for_new_animal(controller):
    _fill(controller)
    assert controller.build_payload() == {
        "name": "Rex",
        "categoryId": 1,
        "breedId": 10,
        "gender": "MALE",
        "size": "EXTRA_LARGE",
        "birthday": "2021-03-04",
        "shortDescription": "Friendly",
        "longDescription": "Very friendly",
        "ownerId": 7,
    }


def test_existing_animal_is_put_with_id(api, controller, state):
    api.add("PUT", "/animals/5", text="")
    _fill(controller)
    controller.form.animal_id = 5

    assert controller.build_payload()["id"] == 5
    assert controller.submit() == Page.MY_ANIMALS
    assert api.calls("PUT", "/animals/5")
    assert b'name="image"' not in api.requests[0].content
    assert state[FLASH_KEY][0].text == "Animal updated successfully!"


def test_conflict_keeps_form_and_shows_status(api, controller, state):
    api.add("POST", "/animals", status=409, text="Duplicate animal")
    _fill(controller)

    assert controller.submit() is None
    assert controller.form.name == " Rex "
    text = controller.messages[-1].text
    assert text.startswith("Error saving animal")
    assert "409" in text
    assert state[FLASH_KEY] == []


def test_missing_name_is_not_sent(api, controller):
    controller.update_form(name="   ")
    assert controller.submit() is None
    assert controller.messages[-1].text == "Name is required."
    assert api.requests == []


def test_no_token_means_no_call(api, session, animal_service, catalog_service, state):
    controller = AnimalEditController(session, animal_service, catalog_service, state=state)
    controller.update_form(name="Rex")

    assert controller.submit() is None
    assert controller.messages[-1].text == "You need to log in first."
    assert api.requests == []


def test_load_for_edit_resolves_ids_by_name(api, controller):
    api.add("GET", "/categories", json_body=CATEGORIES)
    api.add("GET", "/breeds", json_body=BREEDS)
    api.add("GET", "/animals/5", json_body={
        "id": 5, "name": "Rex", "categoryName": "dogs", "breedName": "Poodle",
        "gender": "Male", "size": "medium", "birthday": "2021-03-04",
    })

    controller.ensure_loaded(5)

    form = controller.form
    assert (form.animal_id, form.category_id, form.breed_id) == (5, 1, 11)
    assert form.gender == "MALE"
    assert form.size == "MEDIUM"
    assert form.birthday == date(2021, 3, 4)
    assert api.calls("GET", "/breeds")[0].url.query == b"categoryId=1"


def test_ensure_loaded_keeps_user_edits(api, controller):
    api.add("GET", "/categories", json_body=CATEGORIES)
    api.add("GET", "/breeds", json_body=BREEDS)
    api.add("GET", "/animals/5", json_body={"id": 5, "name": "Rex", "categoryId": 1, "breedId": 10})
    controller.ensure_loaded(5)
    controller.update_form(name="Rexy")

    controller.ensure_loaded(5)

    assert controller.form.name == "Rexy"
    assert len(api.calls("GET", "/animals/5")) == 1


def test_category_change_resets_breed(api, controller):
    api.add("GET", "/breeds", json_body=[])
    controller.form.category_id = 1
    controller.form.breed_id = 10

    controller.update_form(category_id=2)

    assert controller.form.category_id == 2
    assert controller.form.breed_id is None
    assert api.calls("GET", "/breeds")[0].url.query == b"categoryId=2"


def test_unknown_form_field(controller):
    with pytest.raises(TypeError):
        controller.update_form(colour="brown")


def test_failed_load_never_saves_the_previous_animal(api, controller):
    api.add("GET", "/categories", json_body=CATEGORIES)
    api.add("GET", "/breeds", json_body=BREEDS)
    api.add("GET", "/animals/3", json_body={"id": 3, "name": "Rex", "categoryId": 1, "breedId": 10})
    api.add("GET", "/animals/5", status=500)
    controller.load_form(3)

    controller.load_form(5)
    controller.update_form(name="Tom")

    assert controller.load_failed
    assert controller.form.animal_id == 5
    assert controller.form.name == "Tom"
    assert controller.submit() is None
    assert not api.calls("PUT")
    assert not api.calls("POST")


def test_form_for_another_animal_is_refused(api, controller):
    api.add("GET", "/categories", json_body=CATEGORIES)
    api.add("GET", "/breeds", json_body=BREEDS)
    api.add("GET", "/animals/3", json_body={"id": 3, "name": "Rex", "categoryId": 1})
    controller.load_form(3)
    controller.form.animal_id = 4

    assert controller.submit() is None
    assert not api.calls("PUT")


def test_failed_category_reload_keeps_previous_list(api, controller):
    api.add("GET", "/categories", json_body=CATEGORIES)
    api.add("GET", "/categories", status=500)
    assert controller.load_categories().success

    result = controller.load_categories()

    assert not result.success
    assert [c.name for c in result.items] == ["Cats", "Dogs"]
    assert [c.name for c in controller.categories] == ["Cats", "Dogs"]


def test_failed_breed_reload_keeps_previous_list(api, controller):
    api.add("GET", "/breeds", json_body=BREEDS)
    api.add("GET", "/breeds", status=500)
    controller.load_breeds(1)

    assert not controller.load_breeds(1).success
    assert [b.name for b in controller.breeds] == ["Beagle", "Poodle"]


def test_category_change_drops_breeds_of_old_category(api, controller):
    api.add("GET", "/breeds", json_body=BREEDS)
    api.add("GET", "/breeds", status=500)
    controller.update_form(category_id=1)

    controller.update_form(category_id=2)

    assert controller.breeds == []
    assert controller.form.breed_id is None
