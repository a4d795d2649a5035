"""
Exception hierarchy for the graphics discovery library.

All exceptions inherit from GraphicsAPIError so callers can catch the
whole family in one place.

Exception Hierarchy:
    GraphicsAPIError (base)
    ├── ProviderNotFoundError
    └── ExternalServiceError
        └── ProviderError

Usage:
    from graphics_api.exceptions import ProviderError

    raise ProviderError("HTTP 503", provider="storyset")

    try:
        await provider.search(terms)
    except ProviderError as e:
        logger.warning(f"Provider failed: {e}")

The aggregation layer never lets these escape for provider failures; they
are raised inside adapters and converted to empty contributions.
"""

from typing import Any, Dict, Optional


class GraphicsAPIError(Exception):
    """
    Base exception for all graphics discovery errors.

    Attributes:
        message: Human-readable error message
        detail: Optional dict with additional error context
    """

    def __init__(self, message: str, *, detail: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary for structured logging."""
        result = {
            "error": self.__class__.__name__,
            "message": self.message,
        }
        if self.detail:
            result["detail"] = self.detail
        return result


class ProviderNotFoundError(GraphicsAPIError):
    """
    Raised when a provider is looked up by an id the registry doesn't know.

    Examples:
        raise ProviderNotFoundError("Unknown provider", detail={"provider": "unsplash"})
    """


class ExternalServiceError(GraphicsAPIError):
    """
    Base exception for external service failures.
    """

    def __init__(
        self,
        message: str,
        *,
        detail: Optional[Dict[str, Any]] = None,
        service_name: Optional[str] = None,
    ):
        if service_name and detail is None:
            detail = {"service": service_name}
        elif service_name and detail:
            detail["service"] = service_name

        super().__init__(message, detail=detail)


class ProviderError(ExternalServiceError):
    """
    Raised when a graphics provider (Storyset, Phosphor, etc.) fails.

    Examples:
        raise ProviderError("HTTP 404", provider="lucide")
        raise ProviderError("Malformed index", detail={"url": url}, provider="iconoodle")
    """

    def __init__(
        self,
        message: str,
        *,
        detail: Optional[Dict[str, Any]] = None,
        provider: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        if provider and detail is None:
            detail = {"provider": provider}
        elif provider and detail:
            detail["provider"] = provider

        super().__init__(message, detail=detail, service_name="graphics_provider")
        self.provider = provider
        self.status_code = status_code
