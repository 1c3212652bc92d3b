"""Synchronous and asynchronous DeepL API clients."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional, Tuple, Type, Union

import httpx

from ._exceptions import (
    AuthorizationError,
    BadRequestError,
    ConfigError,
    DecodeError,
    InternalServerError,
    NetworkError,
    NotFoundError,
    ProviderError,
    QuotaExceededError,
    RequestTooLargeError,
    ServiceUnavailableError,
    TooManyRequestsError,
    UnexpectedStatusError,
)
from ._types import (
    AccountStatus,
    TranslateResult,
    _parse_account_status,
    _parse_error_message,
    _parse_translate_result,
)
from ._version import __version__

DEFAULT_BASE_URL = "https://api.deepl.com"
DEFAULT_TIMEOUT = 30.0

API_KEY_ENV = "DEEPL_API_KEY"
BASE_URL_ENV = "DEEPL_API_URL"

TRANSLATE_PATH = "/v2/translate"
USAGE_PATH = "/v2/usage"

TimeoutTypes = Union[float, httpx.Timeout]

log = logging.getLogger("deepl_client")

_STATUS_ERRORS: Dict[int, Tuple[Type[ProviderError], str]] = {
    403: (AuthorizationError, "Authorization failed. Please supply a valid auth_key parameter."),
    404: (NotFoundError, "The requested resource could not be found."),
    413: (RequestTooLargeError, "The request size exceeds the limit."),
    429: (TooManyRequestsError, "Too many requests. Please wait and resend your request."),
    456: (QuotaExceededError, "Quota exceeded. The character limit has been reached."),
    503: (ServiceUnavailableError, "Resource currently unavailable. Try again later."),
}


def _parse_base_url(base_url: Optional[str]) -> httpx.URL:
    raw = base_url if base_url is not None else (os.environ.get(BASE_URL_ENV) or DEFAULT_BASE_URL)
    try:
        url = httpx.URL(raw)
    except (httpx.InvalidURL, TypeError) as exc:
        raise ConfigError(f"Failed to parse base URL {raw!r}: {exc}") from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigError(f"Base URL must be an absolute http(s) URL, got {raw!r}")
    return url


def _resolve_api_key(api_key: Optional[str]) -> str:
    """Return the injected key, else read it from the environment now."""
    if api_key is not None:
        if not api_key:
            raise ConfigError("API key is empty")
        return api_key
    key = os.environ.get(API_KEY_ENV)
    if key is None:
        raise ConfigError(
            f"No API key provided. Pass api_key= or set the {API_KEY_ENV} "
            "environment variable."
        )
    if not key:
        raise ConfigError(f"{API_KEY_ENV} is empty")
    return key


def _default_headers() -> Dict[str, str]:
    return {"User-Agent": f"deepl-client-python/{__version__}"}


def _endpoint(base_url: httpx.URL, path: str) -> httpx.URL:
    return base_url.copy_with(path=base_url.path.rstrip("/") + path)


def _build_translate_params(text: str, source_lang: str, target_lang: str) -> Dict[str, str]:
    return {
        "text": text,
        "source_lang": source_lang,
        "target_lang": target_lang,
    }


def _raise_for_status(resp: httpx.Response) -> None:
    status = resp.status_code
    if status == 200:
        return

    body: Optional[Dict[str, Any]] = None
    provider_message: Optional[str] = None
    if resp.content:
        try:
            decoded = resp.json()
            provider_message = _parse_error_message(decoded)
        except (ValueError, DecodeError) as exc:
            raise DecodeError(
                f"Failed to decode error response: {exc}", status_code=status,
            ) from exc
        if isinstance(decoded, dict):
            body = decoded

    exc_type: Type[ProviderError]
    if status == 400:
        exc_type = BadRequestError
        msg = (
            "Bad request. Please check error message and your parameters. "
            f"Error message is {provider_message or ''}"
        )
    elif status in _STATUS_ERRORS:
        exc_type, msg = _STATUS_ERRORS[status]
    elif status >= 500:
        exc_type, msg = InternalServerError, "Internal error"
    else:
        exc_type, msg = UnexpectedStatusError, "Unexpected error"
    raise exc_type(msg, status_code=status, body=body, provider_message=provider_message)


def _decode_json(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError as exc:
        raise DecodeError(f"Failed to parse JSON: {exc}", status_code=resp.status_code) from exc


def _handle_response(resp: httpx.Response, logger: logging.Logger, path: str) -> Any:
    logger.debug("POST %s -> %d", path, resp.status_code)
    try:
        _raise_for_status(resp)
    except ProviderError as exc:
        logger.warning("DeepL returned HTTP %d for %s: %s", resp.status_code, path, exc)
        raise
    return _decode_json(resp)


def _timeout_arg(timeout: Optional[TimeoutTypes]) -> Any:
    return httpx.USE_CLIENT_DEFAULT if timeout is None else timeout


# ===================================================================
# Synchronous client
# ===================================================================


class DeepL:
    """Synchronous DeepL API client.

    Usage::

        from deepl_client import DeepL

        with DeepL("https://api-free.deepl.com") as client:
            result = client.translate("Hello", "EN", "JA")
            print(result.text)

    When ``api_key`` is not given, ``DEEPL_API_KEY`` is read from the
    environment on every call. An injected ``http_client`` keeps its own
    timeout, so ``timeout=`` is rejected alongside it.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        api_key: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
        timeout: Optional[TimeoutTypes] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        if http_client is not None and timeout is not None:
            raise ConfigError(
                "Pass timeout= or http_client=, not both; "
                "set the timeout on the injected client instead"
            )
        self._base_url = _parse_base_url(base_url)
        self._api_key = api_key
        self._logger = logger or log
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            headers=_default_headers(),
            timeout=DEFAULT_TIMEOUT if timeout is None else timeout,
        )

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    def close(self) -> None:
        """Release the underlying HTTP connection pool, if this client created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "DeepL":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _request(
        self,
        path: str,
        params: Dict[str, str],
        timeout: Optional[TimeoutTypes],
    ) -> Any:
        query = {"auth_key": _resolve_api_key(self._api_key), **params}
        self._logger.debug("POST %s", path)
        try:
            resp = self._client.post(
                _endpoint(self._base_url, path),
                params=query,
                headers=_default_headers(),
                timeout=_timeout_arg(timeout),
            )
        except httpx.TransportError as exc:
            self._logger.warning("POST %s failed: %s", path, exc)
            raise NetworkError(f"Failed to send http request: {exc}") from exc
        return _handle_response(resp, self._logger, path)

    # -- Translation -----------------------------------------------------

    def translate(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        *,
        timeout: Optional[TimeoutTypes] = None,
    ) -> TranslateResult:
        """Translate ``text`` from ``source_lang`` to ``target_lang``.

        Language codes (e.g. ``"EN"``, ``"JA"``) are passed through as-is;
        DeepL validates them and answers 400 for unsupported ones.

        Args:
            text: The text to translate.
            source_lang: Source language code.
            target_lang: Target language code.
            timeout: Per-call timeout in seconds, overriding the client's.

        Raises:
            ConfigError: No API key is available.
            NetworkError: The request failed or timed out.
            ProviderError: DeepL answered with a non-200 status.
            DecodeError: The response body is not the documented JSON.
        """
        data = self._request(
            TRANSLATE_PATH,
            _build_translate_params(text, source_lang, target_lang),
            timeout,
        )
        return _parse_translate_result(data)

    # -- Usage -----------------------------------------------------------

    def get_account_status(self, *, timeout: Optional[TimeoutTypes] = None) -> AccountStatus:
        """Return characters used and the character limit for this billing period."""
        return _parse_account_status(self._request(USAGE_PATH, {}, timeout))


# ===================================================================
# Asynchronous client
# ===================================================================


class AsyncDeepL:
    """Asynchronous DeepL API client.

    Usage::

        from deepl_client import AsyncDeepL

        async with AsyncDeepL("https://api-free.deepl.com") as client:
            result = await client.translate("Hello", "EN", "JA")

    Calls can run concurrently on one client. Cancelling the awaiting task
    aborts the in-flight request.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        api_key: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
        timeout: Optional[TimeoutTypes] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        if http_client is not None and timeout is not None:
            raise ConfigError(
                "Pass timeout= or http_client=, not both; "
                "set the timeout on the injected client instead"
            )
        self._base_url = _parse_base_url(base_url)
        self._api_key = api_key
        self._logger = logger or log
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            headers=_default_headers(),
            timeout=DEFAULT_TIMEOUT if timeout is None else timeout,
        )

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    async def close(self) -> None:
        """Release the underlying HTTP connection pool, if this client created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncDeepL":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def _request(
        self, path: str, params: Dict[str, str], timeout: Optional[TimeoutTypes],
    ) -> Any:
        query = {"auth_key": _resolve_api_key(self._api_key), **params}
        self._logger.debug("POST %s", path)
        try:
            resp = await self._client.post(
                _endpoint(self._base_url, path),
                params=query,
                headers=_default_headers(),
                timeout=_timeout_arg(timeout),
            )
        except httpx.TransportError as exc:
            self._logger.warning("POST %s failed: %s", path, exc)
            raise NetworkError(f"Failed to send http request: {exc}") from exc
        return _handle_response(resp, self._logger, path)

    async def translate(
        self, text: str, source_lang: str, target_lang: str, *,
        timeout: Optional[TimeoutTypes] = None,
    ) -> TranslateResult:
        """Translate text. See :meth:`DeepL.translate`."""
        data = await self._request(
            TRANSLATE_PATH,
            _build_translate_params(text, source_lang, target_lang),
            timeout,
        )
        return _parse_translate_result(data)

    async def get_account_status(self, *, timeout: Optional[TimeoutTypes] = None) -> AccountStatus:
        """Get character usage. See :meth:`DeepL.get_account_status`."""
        return _parse_account_status(await self._request(USAGE_PATH, {}, timeout))
