import pytest

from controllers.animal_detail_controller import AnimalDetailController
from controllers.base import FLASH_KEY, Page

REX = {"id": 5, "name": "Rex", "ownerId": 9}
OWN_REX = {"id": 5, "name": "Rex", "ownerId": 7}


@pytest.fixture
def controller(logged_in, animal_service, adoption_service, state):
    return AnimalDetailController(logged_in, animal_service, adoption_service, state=state)


def test_missing_id_is_reported_without_a_call(api, controller):
    assert not controller.load(None)
    assert controller.messages[-1].text == "Missing or invalid animal id."
    assert api.requests == []


def test_guest_sees_details_only(api, session, animal_service, adoption_service, state):
    api.add("GET", "/animals/5", json_body=REX)
    controller = AnimalDetailController(session, animal_service, adoption_service, state=state)

    assert controller.load(5)
    assert controller.animal.name == "Rex"
    assert not controller.is_owner
    assert len(api.requests) == 1
    assert "Authorization" not in api.requests[0].headers


def test_owner_sees_request_count(api, controller):
    api.add("GET", "/animals/5", json_body=OWN_REX)
    api.add("GET", "/adoption-requests/requests-for-my-animal/5", json_body=[{"id": 1}, {"id": 2}])

    controller.load(5)

    assert controller.is_owner
    assert controller.request_count == 2


def test_load_failure(api, controller):
    api.add("GET", "/animals/5", status=404, text="Not found")
    assert not controller.load(5)
    assert controller.animal is None
    assert controller.messages[-1].text == "Cannot load animal details: HTTP 404: Not found"


def test_existing_request_is_found(api, controller):
    api.add("GET", "/animals/5", json_body=REX)
    api.add("GET", "/adoption-requests/my-requests", json_body=[
        {"id": 30, "animalId": 4, "status": "PENDING"},
        {"id": 31, "animalId": 5, "status": "PENDING", "note": "Big garden"},
    ])

    controller.ensure_loaded(5)
    controller.ensure_loaded(5)

    assert controller.existing_request.id == 31
    assert controller.note == "Big garden"
    assert controller.can_cancel()
    assert len(api.calls("GET", "/animals/5")) == 1


def test_send_request(api, controller):
    api.add("GET", "/animals/5", json_body=REX)
    api.add("GET", "/adoption-requests/my-requests", json_body=[])
    api.add("GET", "/adoption-requests/my-requests", json_body=[{"id": 40, "animalId": 5, "status": "PENDING"}])
    api.add("POST", "/adoption-requests", status=201)
    controller.load(5)

    assert controller.send_request("  We love dogs ")

    assert api.json_of(api.calls("POST", "/adoption-requests")[0]) == {"animalId": 5, "note": "We love dogs"}
    assert controller.messages[-1].text == "Adoption request sent!"
    assert controller.existing_request.id == 40


def test_second_request_is_refused_locally(api, controller):
    api.add("GET", "/animals/5", json_body=REX)
    api.add("GET", "/adoption-requests/my-requests", json_body=[{"id": 40, "animalId": 5, "status": "PENDING"}])
    controller.load(5)

    assert not controller.send_request("again")
    assert not api.calls("POST", "/adoption-requests")


def test_update_note(api, controller):
    api.add("GET", "/animals/5", json_body=REX)
    api.add("GET", "/adoption-requests/my-requests", json_body=[{"id": 40, "animalId": 5, "status": "PENDING"}])
    api.add("PUT", "/adoption-requests/40/note", status=200)
    controller.load(5)

    assert controller.update_note("New note")
    assert api.json_of(api.calls("PUT", "/adoption-requests/40/note")[0]) == {"note": "New note"}
    assert controller.note == "New note"


def test_cancel_pending_request(api, controller, state):
    api.add("GET", "/animals/5", json_body=REX)
    api.add("GET", "/adoption-requests/my-requests", json_body=[{"id": 40, "animalId": 5, "status": "PENDING"}])
    api.add("DELETE", "/adoption-requests/40", status=204)
    controller.load(5)

    assert controller.cancel_request() == Page.MY_REQUESTS
    assert state[FLASH_KEY][0].text == "Adoption request cancelled successfully."
    assert not controller.has_sent_request


def test_resolved_request_cannot_be_cancelled(api, controller):
    api.add("GET", "/animals/5", json_body=REX)
    api.add("GET", "/adoption-requests/my-requests", json_body=[{"id": 40, "animalId": 5, "status": "APPROVED"}])
    controller.load(5)

    assert controller.cancel_request() is None
    assert not api.calls("DELETE")


def test_owner_deletes_animal(api, controller, state):
    api.add("GET", "/animals/5", json_body=OWN_REX)
    api.add("GET", "/adoption-requests/requests-for-my-animal/5", json_body=[])
    api.add("DELETE", "/animals/5", status=204)
    controller.load(5)
    controller.confirm_delete()

    assert controller.delete_animal() == Page.MY_ANIMALS
    assert not controller.is_delete_pending()
    assert state[FLASH_KEY][0].text == (
        "Animal and all related adoption requests were successfully deleted."
    )
