"""User store adapter tests."""
import json
from unittest.mock import MagicMock

import pytest
import redis

from messenger_translator.domain.exceptions import RequestClientError, UserStoreError
from messenger_translator.infrastructure.clients.http_client import HttpResponse
from messenger_translator.infrastructure.repositories import RedisUserRepository, RestDBUserRepository


ENDPOINT = "https://db.example.test/rest/preferences"
DOCUMENT = {"_id": "abc123", "psid": "1001", "locale": "fr", "language": "de", "name": "Jean"}


class TestRestDBUserRepository:

    @pytest.fixture
    def http(self):
        return MagicMock()

    @pytest.fixture
    def repository(self, http):
        return RestDBUserRepository(http, ENDPOINT + "/", "key")

    def test_requires_endpoint_and_key(self, http):
        with pytest.raises(ValueError):
            RestDBUserRepository(http, "", "key")
        with pytest.raises(ValueError):
            RestDBUserRepository(http, ENDPOINT, None)

    def test_get_user_queries_by_psid(self, repository, http):
        http.request.return_value = HttpResponse(200, [DOCUMENT])

        user = repository.get_user("1001")

        method, url = http.request.call_args.args
        assert (method, url) == ("GET", ENDPOINT)
        assert json.loads(http.request.call_args.kwargs["params"]["q"]) == {"psid": "1001"}
        assert http.request.call_args.kwargs["headers"]["X-APIKEY"] == "key"
        assert (user.id, user.locale, user.language, user.name, user.record_id) == (
            "1001", "fr", "de", "Jean", "abc123"
        )

    def test_get_user_not_found(self, repository, http):
        http.request.return_value = HttpResponse(200, [])
        assert repository.get_user("1001") is None

    def test_add_user_posts_document(self, repository, http):
        http.request.return_value = HttpResponse(201, dict(DOCUMENT, name=None))

        user = repository.add_user("1001", locale="fr", language="de")

        assert http.request.call_args.args == ("POST", ENDPOINT)
        assert http.request.call_args.kwargs["body"] == {"psid": "1001", "locale": "fr", "language": "de"}
        assert user.record_id == "abc123"

    def test_update_user_patches_record(self, repository, http):
        http.request.side_effect = [
            HttpResponse(200, [DOCUMENT]),
            HttpResponse(200, dict(DOCUMENT, language="ja")),
        ]

        user = repository.update_user("1001", {"language": "ja"})

        patch_call = http.request.call_args_list[1]
        assert patch_call.args == ("PATCH", f"{ENDPOINT}/abc123")
        assert patch_call.kwargs["body"] == {"language": "ja"}
        assert user.language == "ja"

    def test_update_missing_user(self, repository, http):
        http.request.return_value = HttpResponse(200, [])
        with pytest.raises(UserStoreError):
            repository.update_user("1001", {"language": "ja"})

    def test_error_status_raises(self, repository, http):
        http.request.return_value = HttpResponse(401, {"message": "bad key"})
        with pytest.raises(UserStoreError):
            repository.get_user("1001")

    def test_transport_error_raises(self, repository, http):
        http.request.side_effect = RequestClientError("timeout")
        with pytest.raises(UserStoreError):
            repository.get_user("1001")

    def test_malformed_document_raises(self, repository, http):
        http.request.return_value = HttpResponse(200, [{"psid": "1001"}])
        with pytest.raises(UserStoreError):
            repository.get_user("1001")


class TestRedisUserRepository:

    @pytest.fixture
    def client(self):
        store = {}
        client = MagicMock()
        client.get.side_effect = store.get
        client.set.side_effect = store.__setitem__
        client.store = store
        return client

    def test_add_and_get(self, client):
        repository = RedisUserRepository(client)

        repository.add_user("7", locale="de", language="fr", name="Lena")
        user = repository.get_user("7")

        assert json.loads(client.store["user:7"])["language"] == "fr"
        assert (user.locale, user.language, user.name) == ("de", "fr", "Lena")

    def test_get_missing(self, client):
        assert RedisUserRepository(client).get_user("nobody") is None

    def test_update(self, client):
        repository = RedisUserRepository(client)
        repository.add_user("7", locale="de", language="fr")

        repository.update_user("7", {"language": "it"})

        assert repository.get_user("7").language == "it"

    def test_update_missing_user(self, client):
        with pytest.raises(UserStoreError):
            RedisUserRepository(client).update_user("7", {"language": "it"})

    def test_redis_errors_raise_store_error(self, client):
        client.get.side_effect = redis.ConnectionError("down")
        with pytest.raises(UserStoreError):
            RedisUserRepository(client).get_user("7")

    def test_unavailable_client(self):
        with pytest.raises(UserStoreError):
            RedisUserRepository(None).add_user("7", locale="en", language="en")


def test_restdb_list_users():
    http = MagicMock()
    http.request.return_value = HttpResponse(200, [DOCUMENT, dict(DOCUMENT, _id="def", psid="1002")])

    users = RestDBUserRepository(http, ENDPOINT, "key").list_users()

    assert [user.id for user in users] == ["1001", "1002"]
    assert "params" not in http.request.call_args.kwargs


def test_redis_list_users():
    client = MagicMock()
    client.scan_iter.return_value = ["user:1", "user:2"]
    client.mget.return_value = [
        json.dumps({"id": "1", "locale": "en", "language": "fr"}),
        None,
    ]

    users = RedisUserRepository(client).list_users()

    assert [user.id for user in users] == ["1"]
    client.scan_iter.assert_called_once_with(match="user:*")


@pytest.mark.parametrize("stored", ["{not json", json.dumps(["1", "en"]), json.dumps({"id": "7", "colour": "red"})])
def test_redis_corrupt_record_raises_store_error(stored):
    client = MagicMock()
    client.get.return_value = stored

    with pytest.raises(UserStoreError):
        RedisUserRepository(client).get_user("7")


def test_redis_corrupt_record_in_listing_raises_store_error():
    client = MagicMock()
    client.scan_iter.return_value = ["user:1"]
    client.mget.return_value = ["{not json"]

    with pytest.raises(UserStoreError):
        RedisUserRepository(client).list_users()
