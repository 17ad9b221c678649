"""User repository backed by a remote REST CRUD collection (restdb.io style)."""
import json
import logging
from typing import Optional, Dict, Any, List

from messenger_translator.domain.entities.user import UserPreference
from messenger_translator.domain.exceptions import RequestClientError, UserStoreError
from messenger_translator.domain.interfaces.user_repository import IUserRepository
from messenger_translator.infrastructure.clients.http_client import HttpClient, HttpResponse


class RestDBUserRepository(IUserRepository):
    """
    Stores preference documents in a REST collection.

    Documents look like ``{"_id": ..., "psid": ..., "locale": ..., "language": ...,
    "name": ...}``. Lookups query by ``psid``; patches address the ``_id``.
    """

    def __init__(self, http_client: HttpClient, endpoint: str, api_key: str):
        """
        Initialize the repository.

        Args:
            http_client: Shared outbound HTTP client
            endpoint: Collection URL
            api_key: Value of the X-APIKEY header
        """
        if not endpoint:
            raise ValueError("DB_ENDPOINT not configured")
        if not api_key:
            raise ValueError("DB_API_KEY not configured")

        self._http = http_client
        self._endpoint = endpoint.rstrip("/")
        self._headers = {"X-APIKEY": api_key, "Content-Type": "application/json"}
        self._logger = logging.getLogger(__name__)

    def get_user(self, user_id: str) -> Optional[UserPreference]:
        response = self._call(
            "GET",
            self._endpoint,
            params={"q": json.dumps({"psid": user_id})}
        )

        documents = response.body or []
        if not isinstance(documents, list):
            raise UserStoreError(f"Unexpected lookup response: {documents!r}")
        if not documents:
            return None
        return self._to_entity(documents[0])

    def list_users(self) -> List[UserPreference]:
        response = self._call("GET", self._endpoint)

        documents = response.body or []
        if not isinstance(documents, list):
            raise UserStoreError(f"Unexpected listing response: {documents!r}")
        return [self._to_entity(document) for document in documents]

    def add_user(
        self,
        user_id: str,
        locale: str,
        language: str,
        name: Optional[str] = None
    ) -> UserPreference:
        document = {"psid": user_id, "locale": locale, "language": language}
        if name:
            document["name"] = name

        response = self._call("POST", self._endpoint, body=document)
        self._logger.info(f"User {user_id} created (locale={locale}, language={language})")
        return self._to_entity(response.body if isinstance(response.body, dict) else document)

    def update_user(self, user_id: str, fields: Dict[str, Any]) -> UserPreference:
        current = self.get_user(user_id)
        if current is None:
            raise UserStoreError(f"User {user_id} not found")

        response = self._call("PATCH", f"{self._endpoint}/{current.record_id}", body=fields)
        if isinstance(response.body, dict):
            return self._to_entity(response.body)

        updated = current.to_dict()
        updated.update(fields)
        return UserPreference(**updated)

    def _call(self, method: str, url: str, **kwargs) -> HttpResponse:
        try:
            response = self._http.request(method, url, headers=self._headers, **kwargs)
        except RequestClientError as e:
            raise UserStoreError(f"User store unreachable: {e}") from e

        if not response.ok:
            raise UserStoreError(f"User store returned {response.status} for {method} {url}")
        return response

    @staticmethod
    def _to_entity(document: Dict[str, Any]) -> UserPreference:
        try:
            return UserPreference(
                id=str(document["psid"]),
                locale=document["locale"],
                language=document["language"],
                name=document.get("name"),
                record_id=document.get("_id")
            )
        except KeyError as e:
            raise UserStoreError(f"Malformed user document, missing {e}") from e
