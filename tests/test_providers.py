"""Outbound provider tests (Messenger Send API, Cloud Translation)."""
import hashlib
import hmac
from unittest.mock import MagicMock

import pytest

from messenger_translator.domain.exceptions import RequestClientError, TranslationError
from messenger_translator.infrastructure.clients.http_client import HttpResponse
from messenger_translator.infrastructure.providers import GoogleTranslateProvider, MessengerProvider
from messenger_translator.infrastructure.providers.messenger_provider import get_appsecret_proof


class TestMessengerProvider:

    @pytest.fixture
    def http(self):
        http = MagicMock()
        http.request.return_value = HttpResponse(200, {"recipient_id": "1", "message_id": "mid.1"})
        return http

    @pytest.fixture
    def provider(self, http):
        return MessengerProvider(http, "token", "secret", "https://graph.example.test/", "v18.0")

    def test_appsecret_proof(self):
        expected = hmac.new(b"secret", b"token", hashlib.sha256).hexdigest()
        assert get_appsecret_proof("token", "secret") == expected

    def test_requires_credentials(self, http):
        with pytest.raises(ValueError):
            MessengerProvider(http, "", "secret")
        with pytest.raises(ValueError):
            MessengerProvider(http, "token", None)

    def test_send_text_message(self, provider, http):
        result = provider.send_text_message("1", "bonjour")

        assert result["status"] == "success"
        assert result["message_id"] == "mid.1"
        method, url = http.request.call_args.args
        kwargs = http.request.call_args.kwargs
        assert (method, url) == ("POST", "https://graph.example.test/v18.0/me/messages")
        assert kwargs["body"] == {
            "messaging_type": "RESPONSE",
            "recipient": {"id": "1"},
            "message": {"text": "bonjour"},
        }
        assert kwargs["params"] == {
            "access_token": "token",
            "appsecret_proof": get_appsecret_proof("token", "secret"),
        }

    def test_send_text_message_error_status(self, provider, http):
        http.request.return_value = HttpResponse(400, {"error": {"message": "Invalid user", "code": 100}})

        result = provider.send_text_message("1", "hi")

        assert result["status"] == "error"
        assert (result["error_message"], result["error_code"], result["http_status"]) == ("Invalid user", 100, 400)

    def test_send_text_message_transport_error(self, provider, http):
        http.request.side_effect = RequestClientError("timeout")
        assert provider.send_text_message("1", "hi") is None

    def test_send_action(self, provider, http):
        assert provider.send_action("1", "typing_on") == {"status": "success"}
        assert http.request.call_args.kwargs["body"] == {"recipient": {"id": "1"}, "sender_action": "typing_on"}

    def test_send_action_failure(self, provider, http):
        http.request.return_value = HttpResponse(500, "oops")
        assert provider.send_action("1", "mark_seen") is None

    def test_get_user_profile(self, provider, http):
        http.request.return_value = HttpResponse(200, {"name": "Ana", "locale": "es_LA", "id": "1"})

        profile = provider.get_user_profile("1")

        assert profile["locale"] == "es_LA"
        assert http.request.call_args.args == ("GET", "https://graph.example.test/v18.0/1")
        assert http.request.call_args.kwargs["params"]["fields"] == "name,locale"

    def test_get_user_profile_failure(self, provider, http):
        http.request.return_value = HttpResponse(404, {"error": {"message": "not found"}})
        assert provider.get_user_profile("1") is None


class TestGoogleTranslateProvider:

    BASE_URL = "https://translation.example.test/v2"

    @pytest.fixture
    def http(self):
        return MagicMock()

    @pytest.fixture
    def provider(self, http):
        return GoogleTranslateProvider(http, "api-key", self.BASE_URL + "/")

    def test_requires_api_key(self, http):
        with pytest.raises(ValueError):
            GoogleTranslateProvider(http, "", self.BASE_URL)

    def test_translate(self, provider, http):
        http.request.return_value = HttpResponse(200, {"data": {"translations": [
            {"translatedText": "Bonjour", "detectedSourceLanguage": "en"}
        ]}})

        result = provider.translate("Hello", "fr")

        assert (result.text, result.target_language, result.detected_source_language) == ("Bonjour", "fr", "en")
        assert http.request.call_args.args == ("POST", self.BASE_URL)
        assert http.request.call_args.kwargs["body"] == {"q": "Hello", "target": "fr", "format": "text"}
        assert http.request.call_args.kwargs["params"] == {"key": "api-key"}

    def test_get_languages(self, provider, http):
        http.request.return_value = HttpResponse(200, {"data": {"languages": [
            {"language": "fr", "name": "French"},
            {"language": "xx"},
        ]}})

        languages = provider.get_languages("en")

        assert [(item.code, item.name) for item in languages] == [("fr", "French"), ("xx", "xx")]
        assert http.request.call_args.args == ("GET", f"{self.BASE_URL}/languages")
        assert http.request.call_args.kwargs["params"] == {"target": "en", "key": "api-key"}

    @pytest.mark.parametrize("response", [
        HttpResponse(400, {"error": {"message": "Invalid Value"}}),
        HttpResponse(200, {"data": {"translations": []}}),
        HttpResponse(200, "not json"),
    ])
    def test_translate_errors(self, provider, http, response):
        http.request.return_value = response
        with pytest.raises(TranslationError):
            provider.translate("Hello", "fr")

    def test_transport_error(self, provider, http):
        http.request.side_effect = RequestClientError("timeout")
        with pytest.raises(TranslationError):
            provider.get_languages("en")


def test_set_get_started():
    http = MagicMock()
    http.request.return_value = HttpResponse(200, {"result": "success"})
    provider = MessengerProvider(http, "token", "secret", "https://graph.example.test")

    assert provider.set_get_started("get_started")
    assert http.request.call_args.args == ("POST", "https://graph.example.test/v18.0/me/messenger_profile")
    assert http.request.call_args.kwargs["body"] == {"get_started": {"payload": "get_started"}}

    http.request.return_value = HttpResponse(400, {"error": {"message": "bad"}})
    assert not provider.set_get_started("get_started")


@pytest.mark.parametrize("body", [
    {"data": {"translations": [{"detectedSourceLanguage": "en"}]}},
    {"data": {"translations": ["Bonjour"]}},
])
def test_translate_malformed_translation(body):
    http = MagicMock()
    http.request.return_value = HttpResponse(200, body)
    provider = GoogleTranslateProvider(http, "api-key", "https://translation.example.test/v2")

    with pytest.raises(TranslationError):
        provider.translate("Hello", "fr")


@pytest.mark.parametrize("body", [
    {"data": {"languages": [{"name": "French"}]}},
    {"data": {"languages": ["fr"]}},
    {"data": {"languages": None}},
])
def test_get_languages_malformed_entries(body):
    http = MagicMock()
    http.request.return_value = HttpResponse(200, body)
    provider = GoogleTranslateProvider(http, "api-key", "https://translation.example.test/v2")

    with pytest.raises(TranslationError):
        provider.get_languages("en")
