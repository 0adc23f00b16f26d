# tests/adapters/test_api_endpoints.py
import json
import uuid

from fastapi import status

from users_api.core.domain.exceptions import DomainError

VALID_USER = {"login": "johndoe", "firstName": "John", "lastName": "Doe"}


class TestGetUserEndpoint:

    def test_get_existing(self, client, existing_user):
        response = client.get(f"/users/{existing_user.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "id": str(existing_user.id),
            "login": "johndoe",
            "fullName": "Doe John",
            "currentGameId": str(existing_user.current_game_id),
            "gamesPlayed": 5,
        }

    def test_get_unknown(self, client):
        response = client.get(f"/users/{uuid.uuid4()}")
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.content == b""

    def test_get_malformed_id_is_not_found(self, client):
        assert client.get("/users/not-a-guid").status_code == status.HTTP_404_NOT_FOUND

    def test_head_existing(self, client, existing_user):
        response = client.head(f"/users/{existing_user.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.content == b""
        assert response.headers["content-type"] == "application/json; charset=utf-8"

    def test_head_unknown(self, client):
        assert client.head(f"/users/{uuid.uuid4()}").status_code == status.HTTP_404_NOT_FOUND


class TestCreateUserEndpoint:

    def test_create_then_fetch(self, client):
        """
        Scenario: POST a valid user, then GET the returned Location.
        Expected: 201 with the id, and a view whose fullName is 'lastName firstName'.
        """
        response = client.post("/users", json=VALID_USER)

        assert response.status_code == status.HTTP_201_CREATED
        user_id = response.json()
        assert response.headers["location"].endswith(f"/users/{user_id}")

        fetched = client.get(response.headers["location"]).json()
        assert fetched["id"] == user_id
        assert fetched["fullName"] == "Doe John"
        assert fetched["gamesPlayed"] == 0

    def test_invalid_login(self, client, store):
        response = client.post("/users", json={**VALID_USER, "login": "john.doe"})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert list(response.json()) == ["login"]
        assert len(store) == 0

    def test_all_field_errors_in_one_response(self, client):
        response = client.post("/users", json={"login": "bad login"})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert set(response.json()) == {"login", "firstName", "lastName"}
        assert all(isinstance(messages, list) for messages in response.json().values())

    def test_whitespace_only_names(self, client, store):
        response = client.post("/users", json={"login": "abc", "firstName": "   ", "lastName": "\t"})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json() == {
            "firstName": ["The firstName field is required."],
            "lastName": ["The lastName field is required."],
        }
        assert len(store) == 0

    def test_missing_body(self, client):
        assert client.post("/users").status_code == status.HTTP_400_BAD_REQUEST

    def test_malformed_json(self, client):
        response = client.post("/users", content=b"{not json", headers={"Content-Type": "application/json"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestUpsertUserEndpoint:

    def test_put_unknown_id_creates(self, client, store):
        user_id = uuid.uuid4()
        response = client.put(f"/users/{user_id}", json=VALID_USER)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json() == str(user_id)
        assert response.headers["location"].endswith(f"/users/{user_id}")
        assert store.find_by_id(user_id) is not None

    def test_put_existing_replaces_and_resets(self, client, existing_user):
        response = client.put(
            f"/users/{existing_user.id}",
            json={"login": "janedoe", "firstName": "Jane", "lastName": "Roe"},
        )

        assert response.status_code == status.HTTP_204_NO_CONTENT
        fetched = client.get(f"/users/{existing_user.id}").json()
        assert fetched["fullName"] == "Roe Jane"
        assert fetched["gamesPlayed"] == 0
        assert fetched["currentGameId"] is None

    def test_put_malformed_id(self, client):
        assert client.put("/users/12345", json=VALID_USER).status_code == status.HTTP_400_BAD_REQUEST

    def test_put_malformed_id_short_circuits_validation(self, client):
        """A bad id is reported as 400 even when the body would also fail validation."""
        response = client.put("/users/12345", json={"login": "bad login"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_put_missing_body(self, client):
        assert client.put(f"/users/{uuid.uuid4()}").status_code == status.HTTP_400_BAD_REQUEST

    def test_put_invalid_fields(self, client, store):
        response = client.put(f"/users/{uuid.uuid4()}", json={"login": "", "firstName": "A", "lastName": "B"})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert "login" in response.json()
        assert len(store) == 0


class TestPatchUserEndpoint:

    def test_patch(self, client, store, existing_user):
        response = client.patch(
            f"/users/{existing_user.id}",
            json=[{"op": "replace", "path": "/login", "value": "johnny"}],
        )

        assert response.status_code == status.HTTP_204_NO_CONTENT
        stored = store.find_by_id(existing_user.id)
        assert stored.login == "johnny"
        assert stored.games_played == 5

    def test_patch_with_json_patch_media_type(self, client, store, existing_user):
        response = client.patch(
            f"/users/{existing_user.id}",
            content=json.dumps([{"op": "replace", "path": "/lastName", "value": "Roe"}]),
            headers={"Content-Type": "application/json-patch+json"},
        )

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert store.find_by_id(existing_user.id).last_name == "Roe"

    def test_patch_unknown_user(self, client):
        response = client.patch(f"/users/{uuid.uuid4()}", json=[])
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_patch_missing_body(self, client, existing_user):
        assert client.patch(f"/users/{existing_user.id}").status_code == status.HTTP_400_BAD_REQUEST

    def test_patch_malformed_id_without_body_is_not_found(self, client):
        """The id is resolved before the body is looked at."""
        assert client.patch("/users/not-a-guid").status_code == status.HTTP_404_NOT_FOUND

    def test_patch_failing_test_operation(self, client, store, existing_user):
        response = client.patch(
            f"/users/{existing_user.id}",
            json=[
                {"op": "replace", "path": "/login", "value": "changed"},
                {"op": "test", "path": "/firstName", "value": "Nobody"},
            ],
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert list(response.json()) == ["patch[1]"]
        assert store.find_by_id(existing_user.id) == existing_user

    def test_patch_unknown_path(self, client, existing_user):
        response = client.patch(
            f"/users/{existing_user.id}",
            json=[{"op": "replace", "path": "/gamesPlayed", "value": "9"}],
        )
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_patch_producing_invalid_user(self, client, store, existing_user):
        response = client.patch(
            f"/users/{existing_user.id}",
            json=[{"op": "remove", "path": "/firstName"}],
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert "firstName" in response.json()
        assert store.find_by_id(existing_user.id) == existing_user


class TestDeleteUserEndpoint:

    def test_delete(self, client, existing_user):
        assert client.delete(f"/users/{existing_user.id}").status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"/users/{existing_user.id}").status_code == status.HTTP_404_NOT_FOUND

    def test_delete_unknown(self, client):
        assert client.delete(f"/users/{uuid.uuid4()}").status_code == status.HTTP_404_NOT_FOUND


class TestListUsersEndpoint:

    def test_first_page_with_defaults(self, client, seeded_store):
        response = client.get("/users")

        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()) == 10
        header = json.loads(response.headers["x-pagination"])
        assert header == {
            "previousPageLink": None,
            "nextPageLink": "http://testserver/users?pageNumber=2&pageSize=10",
            "totalCount": 25,
            "pageSize": 10,
            "currentPage": 1,
            "totalPages": 3,
        }

    def test_page_beyond_last(self, client, seeded_store):
        response = client.get("/users", params={"pageNumber": 4, "pageSize": 10})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []
        header = json.loads(response.headers["x-pagination"])
        assert header["totalPages"] == 3
        assert header["nextPageLink"] is None
        assert header["previousPageLink"] == "http://testserver/users?pageNumber=3&pageSize=10"

    def test_out_of_range_parameters_are_clamped(self, client, seeded_store):
        response = client.get("/users", params={"pageNumber": -5, "pageSize": 1000})

        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()) == 20
        header = json.loads(response.headers["x-pagination"])
        assert header["currentPage"] == 1
        assert header["pageSize"] == 20

    def test_unparseable_parameters_fall_back_to_defaults(self, client, seeded_store):
        response = client.get("/users", params={"pageNumber": "abc", "pageSize": "xyz"})

        assert response.status_code == status.HTTP_200_OK
        header = json.loads(response.headers["x-pagination"])
        assert (header["currentPage"], header["pageSize"]) == (1, 10)

    def test_items_are_read_views(self, client, existing_user):
        items = client.get("/users").json()
        assert items[0]["fullName"] == "Doe John"


class TestOptionsEndpoint:

    def test_allow_header(self, client):
        response = client.options("/users")

        assert response.status_code == status.HTTP_200_OK
        assert response.headers["allow"] == "GET, POST, OPTIONS"


class TestHealthEndpoints:

    def test_liveness(self, client):
        response = client.get("/health/live")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "ok"

    def test_readiness(self, client):
        response = client.get("/health/ready")
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"storage": "up"}

    def test_readiness_when_store_is_down(self, client, store, monkeypatch):
        monkeypatch.setattr(store, "health_check", lambda: False)

        response = client.get("/health/ready")

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.json() == {"storage": "down"}


class TestExceptionHandlers:

    def test_each_domain_error_has_a_dedicated_handler(self, client):
        handlers = client.app.exception_handlers

        assert DomainError not in handlers
        for error_type in DomainError.__subclasses__():
            assert error_type in handlers
