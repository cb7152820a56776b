# declares the provider contract every variant implements, and the error taxonomy
# the routers map to HTTP responses. adding a provider = one new Provider subclass + one registry entry

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Optional


class ProviderName(str, Enum):
    DEEPSEEK = "deepseek"
    GEMINI = "gemini"


class ProviderError(Exception):
    """Base for every generation failure. `message` is the client-facing
    error string, `details` is an opaque diagnostic payload (str or object).
    Subclasses that fail after a successful upstream call keep the generic
    message and put their `reason` in `details`."""

    message = "API request failed"
    reason: Optional[str] = None

    def __init__(self, message: Optional[str] = None, details: Any = None) -> None:
        self.message = message or self.message
        self.details = details if details is not None else self.reason
        super().__init__(self.reason or self.message)


class UnknownProviderError(ProviderError):
    message = "Invalid AI provider"


class UpstreamError(ProviderError):
    def __init__(self, status_code: Optional[int], details: Any = None) -> None:
        self.status_code = status_code
        if status_code is None:
            message = "API request failed"
        else:
            message = f"API request failed with status {status_code}"
        super().__init__(message, details)


class MalformedResponseError(ProviderError):
    reason = "Malformed response from AI provider"


class InvalidResponseFormatError(ProviderError):
    reason = "Invalid response format from AI provider"


class EmptyDiagramError(ProviderError):
    reason = "Empty diagram code received from AI provider"


class Provider(ABC):
    name: ProviderName

    @property
    @abstractmethod
    def url(self) -> str:
        raise NotImplementedError

    @property
    def authorization(self) -> Optional[str]:
        return None

    @property
    def headers(self) -> Dict[str, str]:
        return {}

    @abstractmethod
    def build_request(self, prompt: str) -> Dict[str, Any]:
        """Provider-specific JSON body for the user's prompt. Must be pure."""
        raise NotImplementedError

    @abstractmethod
    def extract_text(self, data: Any) -> Any:
        """Pull the generated text out of the response envelope. May raise
        KeyError/IndexError/TypeError on an unexpected shape."""
        raise NotImplementedError
