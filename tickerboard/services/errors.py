"""Provider error taxonomy shared by search, detail and market services."""

# Values shipped in example env files; treated the same as a missing key.
PLACEHOLDER_KEYS = {"", "YOUR_FINNHUB_API_KEY_HERE", "YOUR_API_KEY_HERE"}


class ProviderError(Exception):
    """Base class for failures talking to an external market-data provider."""


class ConfigurationError(ProviderError):
    """The provider credential is missing or still set to a placeholder."""


class TransportError(ProviderError):
    """Network failure, non-2xx response or an error body from the provider."""


def is_configured(api_key: str | None) -> bool:
    return bool(api_key) and api_key.strip() not in PLACEHOLDER_KEYS


def require_api_key(api_key: str | None, provider: str) -> str:
    """Return the credential, raising ConfigurationError if it is unusable."""
    if not is_configured(api_key):
        raise ConfigurationError(f"{provider} API key is required")
    return api_key.strip()
