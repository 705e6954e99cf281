"""HTTP client wrapper with bounded timeouts and opt-in retries."""

from __future__ import annotations

import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

logger = logging.getLogger("uni_finder")


class HttpClient:
    """Thin wrapper around :class:`requests.Session` that applies a
    default timeout, a configurable ``User-Agent`` header, and an
    optional retry policy for transient server errors.

    Retries are off by default: the directory lookup has its own single
    country-to-name fallback and nothing else should repeat a request
    behind its back.

    Usage::

        with HttpClient(timeout=10) as client:
            response = client.get("https://example.com", params={"q": "x"})
    """

    def __init__(
        self,
        user_agent: str = "uni_finder/0.1.0",
        timeout: float | tuple[float, float] = 10,
        max_retries: int = 0,
    ) -> None:
        self.timeout = timeout

        self._session = requests.Session()
        self._session.headers["User-Agent"] = user_agent
        self._session.headers["Accept"] = "application/json"

        # raise_on_status=False keeps the final 5xx response so callers see
        # an HTTPError carrying the status instead of a RetryError.
        retry = Retry(
            total=max_retries,
            backoff_factor=1,
            status_forcelist=[500, 502, 503, 504],
            allowed_methods=["GET", "HEAD"],
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry)
        self._session.mount("http://", adapter)
        self._session.mount("https://", adapter)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get(self, url: str, **kwargs) -> requests.Response:
        """Perform a GET request with the configured default timeout.

        Raises :class:`requests.HTTPError` on 4xx/5xx responses and lets
        transport errors (:class:`requests.Timeout`,
        :class:`requests.ConnectionError`, ...) propagate unchanged.
        """
        kwargs.setdefault("timeout", self.timeout)
        logger.debug("GET", extra={"url": url, "params": kwargs.get("params")})
        response = self._session.get(url, **kwargs)
        response.raise_for_status()
        return response

    def close(self) -> None:
        """Close the underlying :class:`requests.Session`."""
        self._session.close()

    # ------------------------------------------------------------------
    # Context-manager protocol
    # ------------------------------------------------------------------

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
