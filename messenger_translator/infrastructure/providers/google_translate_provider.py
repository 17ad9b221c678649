"""Google Cloud Translation (v2 REST) provider implementation."""
import logging
from typing import List, Dict, Any

from messenger_translator.domain.exceptions import RequestClientError, TranslationError
from messenger_translator.domain.interfaces.translation_provider import (
    ITranslationProvider,
    Language,
    TranslationResult,
)
from messenger_translator.infrastructure.clients.http_client import HttpClient, HttpResponse


class GoogleTranslateProvider(ITranslationProvider):
    """
    Translation provider backed by the Cloud Translation v2 REST API.

    Implements ITranslationProvider interface following Strategy Pattern.
    """

    def __init__(self, http_client: HttpClient, api_key: str, base_url: str):
        """
        Initialize the provider.

        Args:
            http_client: Shared outbound HTTP client
            api_key: API key for the translation service
            base_url: Base URL of the v2 API (without trailing slash)
        """
        if not api_key:
            raise ValueError("TRANSLATOR_API_KEY not configured")

        self._http = http_client
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._logger = logging.getLogger(__name__)

    def translate(self, text: str, target_language: str) -> TranslationResult:
        """Translate text, auto-detecting its source language."""
        payload = {"q": text, "target": target_language, "format": "text"}
        response = self._call("POST", self._base_url, body=payload)

        try:
            translation = response.body["data"]["translations"][0]
            return TranslationResult(
                text=translation["translatedText"],
                target_language=target_language,
                detected_source_language=translation.get("detectedSourceLanguage")
            )
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            raise TranslationError(f"Unexpected translation response: {response.body!r}") from e

    def get_languages(self, display_locale: str) -> List[Language]:
        """List supported languages with names in display_locale."""
        response = self._call(
            "GET",
            f"{self._base_url}/languages",
            params={"target": display_locale}
        )

        try:
            return [
                Language(code=item["language"], name=item.get("name", item["language"]))
                for item in response.body["data"]["languages"]
            ]
        except (KeyError, TypeError, AttributeError) as e:
            raise TranslationError(f"Unexpected languages response: {response.body!r}") from e

    def _call(self, method: str, url: str, **kwargs) -> HttpResponse:
        params: Dict[str, Any] = dict(kwargs.pop("params", None) or {}, key=self._api_key)
        try:
            response = self._http.request(method, url, params=params, **kwargs)
        except RequestClientError as e:
            raise TranslationError(f"Translation backend unreachable: {e}") from e

        if not response.ok:
            message = response.body
            if isinstance(response.body, dict):
                message = response.body.get("error", {}).get("message", response.body)
            self._logger.error(f"Translation backend error {response.status}: {message}")
            raise TranslationError(f"Translation backend returned {response.status}: {message}")

        return response
