"""HttpTranslationService: translation overlays over a REST API.

Wraps ``httpx.Client`` with a lazy import so that the base install (no
httpx/tenacity installed) never triggers an ``ImportError`` at module level.
The ``httpx`` and ``tenacity`` packages are only required when
``HttpTranslationService`` is *instantiated*.

Endpoints::

    GET    {base_url}/translations/{content_type}/{content_id}/{language}
         -> {"success": true, "translations": {path: {"value": ...}, ...}}
    POST   {base_url}/translations/save
         <- {"contentType", "contentId", "language", "fields": {path: {...}}}
         -> {"success": true, ...}
    GET    {base_url}/translations/{content_type}/{content_id}/languages
         -> {"success": true, "languages": [{"language": "fr", ...}, ...]}
    DELETE {base_url}/translations/{content_type}/{content_id}/{language}
         -> {"success": true, "deletedCount": n}

The base URL falls back to the ``CONTENT_TREE_API_URL`` environment
variable.  The bearer token is read exclusively from
``CONTENT_TREE_API_TOKEN``; it never appears in ``repr()`` or log output.

Transport errors and HTTP 429/5xx responses are retried with jittered
exponential backoff via ``tenacity``.

Install the optional dependency with::

    pip install content-tree[http]
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from content_tree.errors import TranslationServiceError

__all__ = ["HttpTranslationService"]

logger = logging.getLogger(__name__)

_RETRYABLE_STATUS = frozenset({429, 500, 502, 503, 504})


class HttpTranslationService:
    """Translation service backed by the CMS REST API.

    Args:
        base_url:     API root, e.g. ``"https://cms.example.com/api"``.
            Defaults to ``CONTENT_TREE_API_URL``.
        timeout:      Per-request timeout in seconds.
        max_attempts: Total attempts per request, including the first.
        backoff_max:  Upper bound in seconds for one backoff sleep.
        transport:    Optional ``httpx`` transport (tests pass a
            ``httpx.MockTransport``).

    Raises:
        ImportError: If ``httpx`` or ``tenacity`` is not installed.  The
            message includes the install command.
        ValueError:  If no base URL is given or configured.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float = 10.0,
        max_attempts: int = 5,
        backoff_max: float = 30.0,
        transport: Any = None,
    ) -> None:
        try:
            import httpx
            from tenacity import (
                retry,
                retry_if_exception,
                stop_after_attempt,
                wait_random_exponential,
            )
        except ImportError as exc:
            raise ImportError(
                "httpx and tenacity are required for HttpTranslationService. "
                "Install with: pip install content-tree[http]"
            ) from exc

        resolved = base_url or os.environ.get("CONTENT_TREE_API_URL")
        if not resolved:
            msg = "base_url is required (or set CONTENT_TREE_API_URL)"
            raise ValueError(msg)

        headers = {"Accept": "application/json"}
        token = os.environ.get("CONTENT_TREE_API_TOKEN")
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self._base_url = resolved.rstrip("/")
        self._client: Any = httpx.Client(
            base_url=self._base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

        def _is_retryable(exc: BaseException) -> bool:
            if isinstance(exc, httpx.HTTPStatusError):
                return exc.response.status_code in _RETRYABLE_STATUS
            return isinstance(exc, httpx.TransportError)

        # reraise=True: callers see the last httpx error, not tenacity.RetryError.
        _retry = retry(
            retry=retry_if_exception(_is_retryable),
            wait=wait_random_exponential(max=backoff_max),
            stop=stop_after_attempt(max_attempts),
            reraise=True,
        )
        self._request = _retry(self._raw_request)

    def __repr__(self) -> str:
        """Return a safe repr that never exposes the API token."""
        return f"HttpTranslationService(base_url={self._base_url!r})"

    def __enter__(self) -> HttpTranslationService:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._client.close()

    # ------------------------------------------------------------------
    # TranslationService Protocol surface
    # ------------------------------------------------------------------

    def fetch_overlay(
        self, content_type: str, content_id: int, language: str
    ) -> dict[str, Any]:
        """Fetch the stored overlay for one content item and language.

        Returns:
            Path -> stored entry (a mapping with a ``"value"`` key).

        Raises:
            TranslationServiceError: On a non-retryable HTTP failure, once
                retries are exhausted, or when the API reports failure.
        """
        payload = self._call("GET", f"/translations/{content_type}/{content_id}/{language}")
        translations = payload.get("translations")
        if not isinstance(translations, Mapping):
            return {}
        return dict(translations)

    def save_translations(
        self,
        content_type: str,
        content_id: int,
        language: str,
        fields: Mapping[str, Mapping[str, str]],
    ) -> bool:
        """Persist changed fields; returns True on success."""
        body = {
            "contentType": content_type,
            "contentId": content_id,
            "language": language,
            "fields": {path: dict(field) for path, field in fields.items()},
        }
        self._call("POST", "/translations/save", json=body)
        return True

    def delete_translations(
        self, content_type: str, content_id: int, language: str
    ) -> int:
        """Drop every entry for one language; return how many were removed."""
        payload = self._call(
            "DELETE", f"/translations/{content_type}/{content_id}/{language}"
        )
        deleted = payload.get("deletedCount", 0)
        return deleted if isinstance(deleted, int) else 0

    def languages(self, content_type: str, content_id: int) -> list[str]:
        """Return the languages holding at least one entry, sorted.

        The API reports one summary object per language; only the language
        codes are kept.
        """
        payload = self._call("GET", f"/translations/{content_type}/{content_id}/languages")
        codes: list[str] = []
        for entry in payload.get("languages") or []:
            code = entry.get("language") if isinstance(entry, Mapping) else entry
            if isinstance(code, str) and code:
                codes.append(code)
        return sorted(codes)

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _call(self, method: str, url: str, **kwargs: Any) -> dict[str, Any]:
        import httpx

        try:
            payload = self._request(method, url, **kwargs)
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise TranslationServiceError(
                f"{method} {url} failed with HTTP {status}", status_code=status
            ) from exc
        except httpx.HTTPError as exc:
            raise TranslationServiceError(f"{method} {url} failed: {exc}") from exc
        except ValueError as exc:
            raise TranslationServiceError(f"{method} {url} returned invalid JSON") from exc

        if not isinstance(payload, dict):
            raise TranslationServiceError(f"{method} {url} returned a non-object body")
        if payload.get("success") is False:
            raise TranslationServiceError(
                f"{method} {url} reported failure: {payload.get('error', 'unknown error')}"
            )
        return payload

    def _raw_request(self, method: str, url: str, **kwargs: Any) -> Any:
        """Make one HTTP request.  ``_request`` wraps this with the retry policy."""
        logger.debug("%s %s%s", method, self._base_url, url)
        response = self._client.request(method, url, **kwargs)
        response.raise_for_status()
        return response.json()
