import pytest

from controllers.my_animals_controller import MyAnimalsController


@pytest.fixture
def controller(logged_in, animal_service, adoption_service, state):
    return MyAnimalsController(logged_in, animal_service, adoption_service, state=state)


def test_load_lists_owned_animals_with_pending_counts(api, controller):
    api.add("GET", "/animals/by-owner/7", json_body=[{"id": 1, "name": "Rex"}, {"id": 2, "name": "Tom"}])
    api.add("GET", "/adoption-requests/animal/1/pending/count", json_body=3)
    api.add("GET", "/adoption-requests/animal/2/pending/count", status=500)

    result = controller.load()

    assert result.success
    assert [a.name for a in controller.animals] == ["Rex", "Tom"]
    assert controller.pending_count_for(1) == 3
    assert controller.pending_count_for(2) == 0
    assert controller.messages == []


def test_load_failure_is_reported(api, controller):
    api.add("GET", "/animals/by-owner/7", status=503)

    result = controller.load()

    assert not result.success
    assert "temporarily unavailable" in controller.messages[-1].text


def test_delete_reloads_and_clears_marker(api, controller):
    api.add("DELETE", "/animals/1", status=204)
    api.add("GET", "/animals/by-owner/7", json_body=[])
    controller.confirm_delete(1)

    assert controller.delete_selected()
    assert controller.to_delete_id is None
    assert controller.messages[-1].text == (
        "Animal and all related adoption requests were successfully deleted."
    )
    assert api.calls("GET", "/animals/by-owner/7")


def test_failed_delete_clears_marker(api, controller):
    api.add("DELETE", "/animals/1", status=403, text="Forbidden")
    controller.confirm_delete(1)

    assert not controller.delete_selected()
    assert controller.to_delete_id is None
    assert controller.messages[-1].text == "Failed to delete animal: HTTP 403: Forbidden"


def test_cancel_delete(api, controller):
    controller.confirm_delete(1)
    controller.cancel_delete()
    assert not controller.delete_selected()
    assert api.requests == []
