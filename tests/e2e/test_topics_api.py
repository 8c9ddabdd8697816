"""End-to-end tests for topic endpoints."""

from uuid import uuid4

from tests.e2e.api_seed import create_topic
from tests.harness import create_client_fixture

client = create_client_fixture()


class TestTopicEndpoints:
    """End-to-end tests for the topic API."""

    def test_create_and_get_topic(self, client):
        # Act
        topic = create_topic(client, "Optics", description="Light and lenses")
        response = client.get(f"/api/topics/{topic['id']}")

        # Assert
        assert response.status_code == 200
        assert response.json()["description"] == "Light and lenses"

    def test_duplicate_name_returns_409(self, client):
        # Arrange
        create_topic(client, "Optics")

        # Act
        response = client.post("/api/topics", json={"name": "OPTICS"})

        # Assert
        assert response.status_code == 409
        assert "already exists" in response.json()["detail"]

    def test_invalid_name_returns_422(self, client):
        # Act
        response = client.post("/api/topics", json={"name": "Optics!"})

        # Assert
        assert response.status_code == 422

    def test_list_rejects_invalid_paging(self, client):
        # Act
        response = client.get("/api/topics", params={"page_size": 101})

        # Assert
        assert response.status_code == 400

    def test_list_and_all_are_ordered_by_name(self, client):
        # Arrange
        for name in ["Zoology", "Astronomy", "Botany"]:
            create_topic(client, name)

        # Act
        page = client.get("/api/topics", params={"page_size": 2})
        everything = client.get("/api/topics/all")

        # Assert
        assert [t["name"] for t in page.json()["items"]] == ["Astronomy", "Botany"]
        assert [t["name"] for t in everything.json()] == [
            "Astronomy",
            "Botany",
            "Zoology",
        ]

    def test_update_and_delete_topic(self, client):
        # Arrange
        topic = create_topic(client, "Optics", description="Old")

        # Act
        updated = client.put(
            f"/api/topics/{topic['id']}", json={"name": "Photonics", "description": ""}
        )
        deleted = client.delete(f"/api/topics/{topic['id']}")

        # Assert
        assert updated.json()["name"] == "Photonics"
        assert updated.json()["description"] is None
        assert deleted.status_code == 204
        assert client.get(f"/api/topics/{topic['id']}").status_code == 404

    def test_delete_unknown_topic_returns_404(self, client):
        # Act
        response = client.delete(f"/api/topics/{uuid4()}")

        # Assert
        assert response.status_code == 404
