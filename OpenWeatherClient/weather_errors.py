"""Errors raised by the weather client."""


class WeatherProviderError(Exception):
    """Exception raised when a weather provider fails."""

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: {message}")
        self.provider = provider
        self.message = message


class TransportError(WeatherProviderError):
    """The request never produced a readable response."""


class AuthenticationError(WeatherProviderError):
    """The provider rejected the API key (HTTP 401)."""


class DecodeError(WeatherProviderError):
    """The response body was not the JSON the provider documents."""


class EmptyResponseError(WeatherProviderError):
    """The response decoded but carried no weather condition."""
