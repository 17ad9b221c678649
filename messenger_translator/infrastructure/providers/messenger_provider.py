"""Facebook Messenger provider implementation (Strategy Pattern)."""
import hashlib
import hmac
import logging
from typing import Optional, Dict, Any

from messenger_translator.domain.exceptions import RequestClientError
from messenger_translator.domain.interfaces.message_provider import IMessageProvider
from messenger_translator.infrastructure.clients.http_client import HttpClient, HttpResponse


def get_appsecret_proof(access_token: str, app_secret: str) -> str:
    """HMAC-SHA256 of the access token keyed with the app secret."""
    return hmac.new(
        key=app_secret.encode("utf-8"),
        msg=access_token.encode("utf-8"),
        digestmod=hashlib.sha256
    ).hexdigest()


class MessengerProvider(IMessageProvider):
    """
    Messenger Platform Send API provider implementation.

    Implements IMessageProvider interface following Strategy Pattern.
    Every call is authenticated with the page access token and an
    appsecret_proof.
    """

    def __init__(
        self,
        http_client: HttpClient,
        access_token: str,
        app_secret: str,
        graph_api_url: str = "https://graph.facebook.com",
        api_version: str = "v18.0"
    ):
        """
        Initialize Messenger provider.

        Args:
            http_client: Shared outbound HTTP client
            access_token: Page access token
            app_secret: App secret used for appsecret_proof
            graph_api_url: Graph API host
            api_version: Graph API version
        """
        if not access_token:
            raise ValueError("ACCESS_TOKEN not configured")
        if not app_secret:
            raise ValueError("APP_SECRET not configured")

        self._logger = logging.getLogger(__name__)
        self._http = http_client
        self._access_token = access_token
        self._base_url = f"{graph_api_url.rstrip('/')}/{api_version}"
        self._auth_params = {
            "access_token": access_token,
            "appsecret_proof": get_appsecret_proof(access_token, app_secret),
        }

    def send_text_message(self, recipient: str, message: str) -> Optional[Dict[str, Any]]:
        """
        Send a text message via the Send API.

        Args:
            recipient: Page-scoped user id
            message: Message text

        Returns:
            Response dictionary with status and message_id, or None if failed
        """
        payload = {
            "messaging_type": "RESPONSE",
            "recipient": {"id": recipient},
            "message": {"text": message}
        }

        response = self._post_messages(payload)
        if response is None:
            return None

        if response.ok:
            body = response.body if isinstance(response.body, dict) else {}
            return {
                "status": "success",
                "message_id": body.get("message_id"),
                "response": body
            }

        error_msg, error_code = self._extract_error(response)
        return {
            "status": "error",
            "error_message": error_msg,
            "error_code": error_code,
            "http_status": response.status
        }

    def send_action(self, recipient: str, action: str) -> Optional[Dict[str, Any]]:
        """
        Send a sender action (mark_seen, typing_on, typing_off).

        Args:
            recipient: Page-scoped user id
            action: Sender action token

        Returns:
            Response dictionary, or None if failed
        """
        payload = {
            "recipient": {"id": recipient},
            "sender_action": action
        }

        response = self._post_messages(payload)
        if response is not None and response.ok:
            return {"status": "success"}
        return None

    def get_user_profile(self, user_id: str, fields: str = "name,locale") -> Optional[Dict[str, Any]]:
        """
        Fetch profile fields of a user.

        Args:
            user_id: Page-scoped user id
            fields: Comma separated profile fields

        Returns:
            Profile dictionary, or None if unavailable
        """
        params = dict(self._auth_params, fields=fields)
        try:
            response = self._http.request("GET", f"{self._base_url}/{user_id}", params=params)
        except RequestClientError as e:
            self._logger.warning(f"Profile lookup failed for {user_id}: {e}")
            return None

        if not response.ok or not isinstance(response.body, dict):
            self._log_error(response)
            return None
        return response.body

    def set_get_started(self, payload: str) -> bool:
        """
        Configure the "Get Started" button through the Messenger Profile API.

        Args:
            payload: Postback payload of the button

        Returns:
            True if the profile was updated
        """
        response = self._post("me/messenger_profile", {"get_started": {"payload": payload}})
        if response is None or not response.ok:
            return False

        self._logger.info(f"Get Started button set with payload {payload!r}")
        return True

    def _post_messages(self, payload: Dict[str, Any]) -> Optional[HttpResponse]:
        """
        POST a payload to the /me/messages endpoint.

        Returns:
            HttpResponse, or None on transport failure
        """
        return self._post("me/messages", payload)

    def _post(self, path: str, payload: Dict[str, Any]) -> Optional[HttpResponse]:
        try:
            response = self._http.request(
                "POST",
                f"{self._base_url}/{path}",
                headers={"Content-Type": "application/json"},
                body=payload,
                params=self._auth_params
            )
        except RequestClientError as e:
            self._logger.error(f"Graph API request to /{path} failed: {e}")
            return None

        if not response.ok:
            self._log_error(response)
        return response

    @staticmethod
    def _extract_error(response: HttpResponse):
        if isinstance(response.body, dict):
            error = response.body.get("error", {})
            return error.get("message", "Unknown error"), error.get("code")
        return response.body or "Unknown error", None

    def _log_error(self, response: HttpResponse) -> None:
        """Log error response details."""
        error_msg, error_code = self._extract_error(response)
        self._logger.error(
            f"HTTP {response.status} error: {error_msg} (code: {error_code})"
        )
