"""HTTP-layer tests for the /users routes with the service mocked out."""

from user_api.app.core.exceptions import UserNotFoundError
from user_api.app.schemas.user import UserCreate, UserUpdate


def test_get_all_users(mocked_client, mock_service, user):
    mock_service.get_all_users.return_value = [user]

    response = mocked_client.get("/users")

    assert response.status_code == 200
    assert response.json()[0]["id"] == 1


def test_get_user_by_id(mocked_client, mock_service, user):
    mock_service.get_user_by_id.return_value = user

    response = mocked_client.get("/users/1")

    assert response.status_code == 200
    assert response.json() == {"id": 1, "name": "Test", "email": "test@example.com"}
    mock_service.get_user_by_id.assert_awaited_once_with(1)


def test_get_user_by_id_not_found(mocked_client, mock_service):
    mock_service.get_user_by_id.side_effect = UserNotFoundError(1)

    response = mocked_client.get("/users/1")

    assert response.status_code == 404
    assert response.json() == {"detail": "User 1 not found"}


def test_create_user(mocked_client, mock_service, user):
    mock_service.create_user.return_value = user

    response = mocked_client.post("/users", json=user.model_dump())

    assert response.status_code == 200
    assert response.json()["id"] == 1
    mock_service.create_user.assert_awaited_once_with(
        UserCreate(name="Test", email="test@example.com")
    )


def test_update_user(mocked_client, mock_service, user):
    mock_service.update_user.return_value = user

    response = mocked_client.put("/users/1", json=user.model_dump())

    assert response.status_code == 200
    assert response.json()["id"] == 1
    mock_service.update_user.assert_awaited_once_with(
        1, UserUpdate(name="Test", email="test@example.com")
    )


def test_update_user_not_found(mocked_client, mock_service):
    mock_service.update_user.side_effect = UserNotFoundError(3)

    response = mocked_client.put("/users/3", json={"name": "x", "email": "y"})

    assert response.status_code == 404


def test_delete_user(mocked_client, mock_service):
    response = mocked_client.delete("/users/1")

    assert response.status_code == 200
    assert response.content == b""
    mock_service.delete_user.assert_awaited_once_with(1)


def test_delete_user_not_found(mocked_client, mock_service):
    mock_service.delete_user.side_effect = UserNotFoundError(1)

    response = mocked_client.delete("/users/1")

    assert response.status_code == 404


def test_malformed_id_is_rejected(mocked_client, mock_service):
    response = mocked_client.get("/users/abc")

    assert response.status_code == 422
    mock_service.get_user_by_id.assert_not_called()


def test_id_outside_64_bit_range_is_rejected(mocked_client, mock_service):
    response = mocked_client.delete(f"/users/{2**63}")

    assert response.status_code == 422
    mock_service.delete_user.assert_not_called()


def test_malformed_json_body_is_rejected(mocked_client, mock_service):
    response = mocked_client.post(
        "/users", content=b"{not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 422
    mock_service.create_user.assert_not_called()
