"""deepl-client exception hierarchy."""

from __future__ import annotations

from typing import Any, Dict, Optional


class DeepLError(Exception):
    """Base exception for all deepl-client errors."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ConfigError(DeepLError):
    """Malformed base URL or missing/empty API key."""


class NetworkError(DeepLError):
    """The request could not be sent or timed out."""


class DecodeError(DeepLError):
    """The response body is not the JSON the API documents."""


class ProviderError(DeepLError):
    """DeepL answered with a non-success status code."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        body: Optional[Dict[str, Any]] = None,
        provider_message: Optional[str] = None,
    ) -> None:
        super().__init__(message, status_code=status_code, body=body)
        self.provider_message = provider_message


class BadRequestError(ProviderError):
    """Invalid request parameters (HTTP 400)."""


class AuthorizationError(ProviderError):
    """Invalid auth_key (HTTP 403)."""


class NotFoundError(ProviderError):
    """Resource not found (HTTP 404)."""


class RequestTooLargeError(ProviderError):
    """Request size exceeds the limit (HTTP 413)."""


class TooManyRequestsError(ProviderError):
    """Too many requests (HTTP 429)."""


class QuotaExceededError(ProviderError):
    """Character quota for the billing period is used up (HTTP 456).

    Check remaining characters with ``get_account_status()``.
    """


class ServiceUnavailableError(ProviderError):
    """DeepL is temporarily unavailable (HTTP 503)."""


class InternalServerError(ProviderError):
    """DeepL returned a server-side error (HTTP 5xx other than 503)."""


class UnexpectedStatusError(ProviderError):
    """Any other non-success status code."""
