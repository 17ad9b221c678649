"""Uniform HTTP client used by every outbound adapter."""
import logging
from dataclasses import dataclass
from typing import Optional, Dict, Any
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from messenger_translator.domain.exceptions import RequestClientError


@dataclass
class HttpResponse:
    """Status code and decoded body of an outbound call."""
    status: int
    body: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class HttpClient:
    """
    Thin wrapper around a pooled requests session.

    Every adapter goes through ``request(method, url, headers, body)`` and
    gets back ``HttpResponse(status, body)``. HTTP error statuses are returned,
    not raised; only transport failures raise RequestClientError.
    """

    def __init__(self, timeout: int = 10, session: Optional[requests.Session] = None):
        """
        Initialize the client.

        Args:
            timeout: Per-request timeout in seconds
            session: Optional preconfigured session (Dependency Injection)
        """
        self.timeout = timeout
        self._logger = logging.getLogger(__name__)
        self._session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        """Create a requests session with connection pooling and retry strategy."""
        session = requests.Session()

        retry_strategy = Retry(
            total=2,
            backoff_factor=0.5,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET", "POST", "PATCH"]
        )

        adapter = HTTPAdapter(
            max_retries=retry_strategy,
            pool_connections=20,
            pool_maxsize=20,
            pool_block=False
        )

        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    def request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        body: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None
    ) -> HttpResponse:
        """
        Perform an HTTP request.

        Args:
            method: HTTP method (GET, POST, PATCH, ...)
            url: Absolute URL
            headers: Optional headers dictionary
            body: Optional JSON-serializable body
            params: Optional query parameters

        Returns:
            HttpResponse with the JSON-decoded body (raw text if not JSON)

        Raises:
            RequestClientError: If the request could not be completed
        """
        headers = dict(headers or {})
        headers.setdefault("Accept", "application/json")

        try:
            response = self._session.request(
                method=method,
                url=url,
                headers=headers,
                params=params,
                json=body,
                timeout=self.timeout
            )
        except requests.Timeout as e:
            self._logger.error(f"Request timeout: {method} {url}")
            raise RequestClientError(f"Timeout calling {method} {url}") from e
        except requests.RequestException as e:
            self._logger.error(f"Request failed: {method} {url} - {e}")
            raise RequestClientError(f"Error calling {method} {url}: {e}") from e

        self._logger.debug(f"{method} {url} -> {response.status_code}")

        if response.status_code >= 400:
            self._logger.warning(
                f"HTTP {response.status_code} from {method} {url}: {response.text[:500]}"
            )

        return HttpResponse(status=response.status_code, body=self._decode(response))

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    def close(self) -> None:
        self._session.close()
