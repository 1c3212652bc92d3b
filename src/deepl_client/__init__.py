"""deepl-client: a Python binding for the DeepL translation API.

Usage::

    from deepl_client import DeepL

    client = DeepL("https://api-free.deepl.com")  # reads DEEPL_API_KEY per call
    result = client.translate("Hello", "EN", "JA")
    for segment in result:
        print(segment.detected_source_language, segment.text)
"""

from ._version import __version__
from ._client import DeepL, AsyncDeepL, DEFAULT_BASE_URL
from ._exceptions import (
    DeepLError,
    ConfigError,
    NetworkError,
    DecodeError,
    ProviderError,
    BadRequestError,
    AuthorizationError,
    NotFoundError,
    RequestTooLargeError,
    TooManyRequestsError,
    QuotaExceededError,
    ServiceUnavailableError,
    InternalServerError,
    UnexpectedStatusError,
)
from ._types import (
    Translation,
    TranslateResult,
    AccountStatus,
)

__all__ = [
    "__version__",
    # Clients
    "DeepL",
    "AsyncDeepL",
    "DEFAULT_BASE_URL",
    # Exceptions
    "DeepLError",
    "ConfigError",
    "NetworkError",
    "DecodeError",
    "ProviderError",
    "BadRequestError",
    "AuthorizationError",
    "NotFoundError",
    "RequestTooLargeError",
    "TooManyRequestsError",
    "QuotaExceededError",
    "ServiceUnavailableError",
    "InternalServerError",
    "UnexpectedStatusError",
    # Response types
    "Translation",
    "TranslateResult",
    "AccountStatus",
]
