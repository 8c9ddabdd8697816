"""End-to-end tests for user and health endpoints."""

from uuid import uuid4

from tests.e2e.api_seed import create_user
from tests.harness import create_client_fixture

client = create_client_fixture()

# File-backed client whose storage root cannot hold files
broken_storage_client = create_client_fixture(unmock={"persistence"})


class TestUserEndpoints:
    """End-to-end tests for the user API."""

    def test_create_and_get_user(self, client):
        # Act
        user = create_user(client, "marie", display_name="Marie Curie")
        response = client.get(f"/api/users/{user['id']}")

        # Assert
        assert response.status_code == 200
        assert response.json()["display_name"] == "Marie Curie"

    def test_duplicate_username_returns_409(self, client):
        # Arrange
        create_user(client, "marie")

        # Act
        response = client.post(
            "/api/users",
            json={
                "username": "MARIE",
                "email": "other@example.com",
                "display_name": "Other",
            },
        )

        # Assert
        assert response.status_code == 409

    def test_invalid_input_returns_422(self, client):
        # Act
        bad_username = client.post(
            "/api/users",
            json={"username": "a b", "email": "ab@example.com", "display_name": "AB"},
        )
        bad_email = client.post(
            "/api/users",
            json={"username": "abc", "email": "not-an-email", "display_name": "AB"},
        )

        # Assert
        assert bad_username.status_code == 422
        assert bad_email.status_code == 422

    def test_lookup_by_username_and_email(self, client):
        # Arrange
        user = create_user(client, "marie")

        # Act
        by_username = client.get("/api/users/by-username/MARIE")
        by_email = client.get("/api/users/by-email/marie@example.com")
        missing = client.get("/api/users/by-username/nobody")

        # Assert
        assert by_username.json()["id"] == user["id"]
        assert by_email.json()["id"] == user["id"]
        assert missing.status_code == 404

    def test_update_profile(self, client):
        # Arrange
        user = create_user(client, "marie")

        # Act
        response = client.put(
            f"/api/users/{user['id']}", json={"bio": "Two Nobel prizes"}
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["bio"] == "Two Nobel prizes"
        assert response.json()["display_name"] == "Marie"

    def test_delete_user(self, client):
        # Arrange
        user = create_user(client, "marie")

        # Act
        response = client.delete(f"/api/users/{user['id']}")

        # Assert
        assert response.status_code == 204
        assert client.get(f"/api/users/{user['id']}").status_code == 404
        assert client.get("/api/users").json()["total_count"] == 0

    def test_get_unknown_user_returns_404(self, client):
        # Act
        response = client.get(f"/api/users/{uuid4()}")

        # Assert
        assert response.status_code == 404
        assert "User not found" in response.json()["detail"]


class TestHealthEndpoint:
    """Tests for the health endpoint."""

    def test_health(self, client, tmp_path):
        # Act
        response = client.get("/health")

        # Assert
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["storage_path"] == str(tmp_path)


class TestStorageFailure:
    """Tests for storage access failures."""

    def test_unusable_storage_returns_503(
        self, broken_storage_client, tmp_path, monkeypatch
    ):
        """A storage root that is a regular file cannot be read or written."""
        # Arrange
        blocker = tmp_path / "not-a-directory"
        blocker.write_text("")
        monkeypatch.setenv("STORAGE__PATH", str(blocker))

        # Act
        response = broken_storage_client.get("/api/users")

        # Assert
        assert response.status_code == 503
        assert response.json() == {"detail": "Storage unavailable"}
