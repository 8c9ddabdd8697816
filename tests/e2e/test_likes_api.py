"""End-to-end tests for like endpoints."""

from uuid import uuid4

from tests.harness import create_client_fixture

client = create_client_fixture()


class TestLikeEndpoints:
    """End-to-end tests for the like API."""

    def test_like_is_idempotent(self, client):
        # Arrange
        question_id, user_id = uuid4(), uuid4()
        url = f"/api/likes/question/{question_id}/user/{user_id}"

        # Act
        first = client.post(url)
        second = client.post(url)

        # Assert
        assert first.json() == {"changed": True}
        assert second.json() == {"changed": False}
        count = client.get(f"/api/likes/question/{question_id}/count")
        assert count.json() == {"count": 1}
        assert client.get(url).json() == {"liked": True}

    def test_unlike(self, client):
        # Arrange
        question_id, user_id = uuid4(), uuid4()
        url = f"/api/likes/question/{question_id}/user/{user_id}"
        client.post(url)

        # Act
        first = client.delete(url)
        second = client.delete(url)

        # Assert
        assert first.json() == {"changed": True}
        assert second.json() == {"changed": False}
        assert client.get(url).json() == {"liked": False}

    def test_user_likes(self, client):
        # Arrange
        user_id = uuid4()
        q1, q2 = uuid4(), uuid4()
        client.post(f"/api/likes/question/{q1}/user/{user_id}")
        client.post(f"/api/likes/question/{q2}/user/{user_id}")

        # Act
        count = client.get(f"/api/likes/user/{user_id}/count")
        liked = client.get(f"/api/likes/user/{user_id}/questions")

        # Assert
        assert count.json() == {"count": 2}
        assert set(liked.json()["question_ids"]) == {str(q1), str(q2)}
