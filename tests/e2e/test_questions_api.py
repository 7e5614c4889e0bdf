"""End-to-end tests for question and answer endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from stackit.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by in-memory repositories."""
    return TestClient(create_app(build_test_container()))


@pytest.fixture
def asker() -> dict[str, str]:
    return {"X-User-Id": str(uuid4())}


@pytest.fixture
def helper() -> dict[str, str]:
    return {"X-User-Id": str(uuid4())}


def ask(client, headers, **overrides):
    body = {
        "title": "How to use React hooks with TypeScript?",
        "description": "Typing useState with a union type keeps failing.",
        "tags": ["React", "typescript"],
    }
    body.update(overrides)
    response = client.post("/questions", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def answer(client, headers, question_id, content):
    response = client.post(
        f"/questions/{question_id}/answers", json={"content": content}, headers=headers
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestQuestionEndpoints:
    """End-to-end tests for /questions.

    Note: These tests focus on the HTTP API interface layer.
    More detailed business logic tests are in unit tests.
    """

    def test_create_and_get_question(self, client, asker):
        """A created question can be read back and counts views."""
        # Arrange
        created = ask(client, asker)

        # Act
        first = client.get(f"/questions/{created['question_id']}")
        second = client.get(f"/questions/{created['question_id']}")

        # Assert
        assert created["tags"] == ["react", "typescript"]
        assert created["votes"] == 0
        assert created["author_id"] == asker["X-User-Id"]
        assert first.status_code == 200
        assert first.json()["views"] == 1
        assert second.json()["views"] == 2

    def test_create_without_identity_is_unauthorized(self, client):
        """Writes need X-User-Id."""
        # Act
        response = client.post(
            "/questions",
            json={
                "title": "A question without an author",
                "description": "Nobody is asking this question at all.",
            },
        )

        # Assert
        assert response.status_code == 401
        assert response.json()["kind"] == "unauthorized"

    def test_malformed_identity_is_validation_error(self, client):
        """A non-UUID caller id is rejected."""
        response = client.post(
            "/questions",
            json={"title": "x" * 20, "description": "y" * 30},
            headers={"X-User-Id": "not-a-uuid"},
        )

        assert response.status_code == 400
        assert response.json()["kind"] == "validation_error"

    def test_invalid_question_is_validation_error(self, client, asker):
        """Domain rules surface as 400 validation_error."""
        # Act
        response = client.post(
            "/questions",
            json={"title": "short", "description": "also short", "tags": []},
            headers=asker,
        )

        # Assert
        assert response.status_code == 400
        body = response.json()
        assert body["kind"] == "validation_error"
        assert "title" in body["message"]

    def test_missing_body_field_is_validation_error(self, client, asker):
        """Schema errors are 400, not 422."""
        response = client.post(
            "/questions", json={"title": "No description here"}, headers=asker
        )

        assert response.status_code == 400
        assert response.json()["kind"] == "validation_error"

    def test_unknown_question_is_not_found(self, client):
        """Unknown ids give 404 not_found."""
        response = client.get(f"/questions/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["kind"] == "not_found"

    def test_list_filters_and_paginates(self, client, asker):
        """Listing supports search, tags and pagination metadata."""
        # Arrange
        react = ask(client, asker)
        ask(
            client,
            asker,
            title="Tuning PostgreSQL autovacuum",
            description="Dead tuples keep piling up on a busy table.",
            tags=["postgresql"],
        )
        ask(
            client,
            asker,
            title="Memoizing selectors in Redux",
            description="My React components re-render on every store update.",
            tags=["redux"],
        )

        # Act
        by_tag = client.get("/questions", params={"tags": "react,go"})
        by_search = client.get("/questions", params={"search": "REACT"})
        paged = client.get("/questions", params={"limit": 2, "page": 2})
        too_big = client.get("/questions", params={"limit": 1000})

        # Assert
        assert [q["question_id"] for q in by_tag.json()["items"]] == [
            react["question_id"]
        ]
        assert by_search.json()["total"] == 2
        assert paged.json()["total"] == 3
        assert paged.json()["total_pages"] == 2
        assert len(paged.json()["items"]) == 1
        assert too_big.status_code == 400

    def test_page_beyond_limit_is_validation_error(self, client):
        """Absurd page numbers are rejected before reaching the store."""
        response = client.get("/questions", params={"page": 10**12})

        assert response.status_code == 400
        assert response.json()["kind"] == "validation_error"

    def test_only_author_can_delete(self, client, asker, helper):
        """Non-authors get 403; authors get 204 and the question disappears."""
        # Arrange
        created = ask(client, asker)
        url = f"/questions/{created['question_id']}"

        # Act
        forbidden = client.delete(url, headers=helper)
        deleted = client.delete(url, headers=asker)

        # Assert
        assert forbidden.status_code == 403
        assert forbidden.json()["kind"] == "forbidden"
        assert deleted.status_code == 204
        assert client.get(url).status_code == 404
        assert client.get("/questions").json()["total"] == 0


class TestAnswerEndpoints:
    """End-to-end tests for answers and acceptance."""

    def test_accepted_answer_listed_first(self, client, asker, helper):
        """The accepted answer leads even with fewer votes."""
        # Arrange
        question = ask(client, asker)
        qid = question["question_id"]
        low = answer(client, helper, qid, "Give useState an explicit generic.")
        high = answer(client, helper, qid, "Use a discriminated union for state.")
        for _ in range(7):
            client.post(f"/answers/{high['answer_id']}/vote", json={"direction": 1})
        for _ in range(3):
            client.post(f"/answers/{low['answer_id']}/vote", json={"direction": 1})

        # Act
        accepted = client.post(
            f"/questions/{qid}/accept",
            json={"answer_id": low["answer_id"]},
            headers=asker,
        )
        listing = client.get(f"/questions/{qid}/answers")

        # Assert
        assert accepted.status_code == 200
        assert accepted.json()["accepted_answer_id"] == low["answer_id"]
        items = listing.json()["items"]
        assert [a["answer_id"] for a in items] == [low["answer_id"], high["answer_id"]]
        assert [a["votes"] for a in items] == [3, 7]
        assert items[0]["is_accepted"]

    def test_accept_by_non_author_forbidden(self, client, asker, helper):
        """Only the asker may accept."""
        # Arrange
        qid = ask(client, asker)["question_id"]
        reply = answer(client, helper, qid, "Try annotating the return type.")

        # Act
        response = client.post(
            f"/questions/{qid}/accept",
            json={"answer_id": reply["answer_id"]},
            headers=helper,
        )

        # Assert
        assert response.status_code == 403

    def test_answer_to_unknown_question_not_found(self, client, helper):
        """Answers need an existing question."""
        response = client.post(
            f"/questions/{uuid4()}/answers",
            json={"content": "An answer into the void."},
            headers=helper,
        )

        assert response.status_code == 404

    def test_answers_by_author_and_delete(self, client, asker, helper):
        """Authors can list and delete their answers."""
        # Arrange
        qid = ask(client, asker)["question_id"]
        reply = answer(client, helper, qid, "Annotate the custom hook's return.")

        # Act
        mine = client.get("/answers", params={"author": helper["X-User-Id"]})
        forbidden = client.delete(f"/answers/{reply['answer_id']}", headers=asker)
        deleted = client.delete(f"/answers/{reply['answer_id']}", headers=helper)

        # Assert
        assert [a["answer_id"] for a in mine.json()["items"]] == [reply["answer_id"]]
        assert forbidden.status_code == 403
        assert deleted.status_code == 204
        assert client.get(f"/questions/{qid}/answers").json()["total"] == 0
        assert client.get("/questions").json()["items"][0]["answer_count"] == 0
