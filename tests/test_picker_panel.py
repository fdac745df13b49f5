"""Tests for the floating meaning panel endpoints."""

from uuid import uuid4

from fastapi import status
from fastapi.testclient import TestClient

from tests.conftest import FakeDictionaryService, start_session


def _panel_url(session_id: str, action: str = "") -> str:
    url = f"/api/v1/picker/sessions/{session_id}/panel"
    return f"{url}/{action}" if action else url


def _toggle(client: TestClient, session_id: str, position: int) -> None:
    response = client.post(f"/api/v1/picker/sessions/{session_id}/tokens/{position}/toggle")
    assert response.status_code == status.HTTP_200_OK


class TestPanelView:
    def test_panel_hidden_without_picks(self, client: TestClient) -> None:
        session_id = start_session(client, "An apple a day")["id"]

        response = client.get(_panel_url(session_id))

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["visible"] is False
        assert data["item_count"] == 0
        assert data["words"] == []
        assert data["phrases"] == []

    def test_panel_shows_definitions(
        self, client: TestClient, dictionary_service: FakeDictionaryService
    ) -> None:
        session_id = start_session(client, "An Apple a day")["id"]
        _toggle(client, session_id, 2)

        data = client.get(_panel_url(session_id)).json()

        assert data["visible"] is True
        assert data["item_count"] == 1
        [card] = data["words"]
        assert card["word"] == "apple"
        assert card["phonetic"] == "/ˈæp.əl/"
        assert card["loading"] is False
        assert card["error"] is None
        assert card["definitions"] == ["A round fruit.", "The tree bearing it."]
        assert dictionary_service.calls == ["apple"]

    def test_panel_reports_lookup_failure(self, client: TestClient) -> None:
        session_id = start_session(client, "zzyzx road")["id"]
        _toggle(client, session_id, 0)

        data = client.get(_panel_url(session_id)).json()

        [card] = data["words"]
        assert card["word"] == "zzyzx"
        assert card["loading"] is False
        assert card["error"] == "No definition found"
        assert card["definitions"] == []

    def test_same_word_twice_is_looked_up_once(
        self, client: TestClient, dictionary_service: FakeDictionaryService
    ) -> None:
        session_id = start_session(client, "Apple pie, apple tart")["id"]
        _toggle(client, session_id, 0)
        _toggle(client, session_id, 5)

        data = client.get(_panel_url(session_id)).json()

        assert [card["word"] for card in data["words"]] == ["apple"]
        assert dictionary_service.calls == ["apple"]

    def test_phrases_listed_before_words(self, client: TestClient) -> None:
        session_id = start_session(client, "fast and furious driving")["id"]
        for position in (6, 0, 2):
            _toggle(client, session_id, position)
        client.post(
            f"/api/v1/picker/sessions/{session_id}/merge", json={"first": 0, "second": 2}
        )

        data = client.get(_panel_url(session_id)).json()

        assert data["phrases"] == ["fast and"]
        assert [card["word"] for card in data["words"]] == ["driving"]
        assert data["item_count"] == 2

    def test_unknown_session_returns_404(self, client: TestClient) -> None:
        response = client.get(_panel_url(str(uuid4())))
        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestPanelDrag:
    def test_drag_moves_panel(self, client: TestClient) -> None:
        session_id = start_session(client, "fast")["id"]

        pressed = client.post(_panel_url(session_id, "press"), json={"x": 30, "y": 25})
        assert pressed.json()["dragging"] is True

        moved = client.post(_panel_url(session_id, "move"), json={"x": 110, "y": 205}).json()
        assert (moved["x"], moved["y"]) == (100, 200)

        released = client.post(_panel_url(session_id, "release")).json()
        assert released["dragging"] is False
        assert (released["x"], released["y"]) == (100, 200)

    def test_move_without_press_does_nothing(self, client: TestClient) -> None:
        session_id = start_session(client, "fast")["id"]

        moved = client.post(_panel_url(session_id, "move"), json={"x": 300, "y": 300}).json()

        assert (moved["x"], moved["y"]) == (20, 20)

    def test_press_inside_content_does_not_drag(self, client: TestClient) -> None:
        session_id = start_session(client, "fast")["id"]

        pressed = client.post(
            _panel_url(session_id, "press"), json={"x": 40, "y": 60, "in_content": True}
        ).json()
        moved = client.post(_panel_url(session_id, "move"), json={"x": 300, "y": 300}).json()

        assert pressed["dragging"] is False
        assert (moved["x"], moved["y"]) == (20, 20)

    def test_minimize_toggles_width(self, client: TestClient) -> None:
        session_id = start_session(client, "fast")["id"]

        minimized = client.post(_panel_url(session_id, "minimize")).json()
        assert minimized["minimized"] is True
        assert minimized["width"] == 200

        expanded = client.post(_panel_url(session_id, "minimize")).json()
        assert expanded["minimized"] is False
        assert expanded["width"] == 320
