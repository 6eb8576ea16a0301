from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class SearchResult:
    """A single symbol match, normalized from any provider's response shape."""

    symbol: str  # Ticker as the provider reports it (e.g. "AAPL", "TSCO.LON")
    name: str = ""
    display_text: str = ""  # Falls back to the symbol when the provider has none
    type: str | None = None  # Provider's security type, e.g. "Equity", "Common Stock"
    region: str | None = None
    currency: str | None = None

    def __post_init__(self):
        if not self.display_text:
            object.__setattr__(self, "display_text", self.symbol)

    @classmethod
    def from_query(cls, query: str) -> "SearchResult":
        """Treat a raw query as a direct symbol lookup."""
        symbol = query.strip()
        return cls(symbol=symbol, name=symbol)

    def to_dict(self) -> dict:
        return asdict(self)


class SearchProvider(ABC):
    """Abstract base for symbol search backends.

    Each implementation wraps one HTTP API and normalizes its matches into
    SearchResult, preserving the provider's ranking order and capping the
    list at ``limit``.
    """

    name: str = ""

    def __init__(self, api_key: str | None = None, *, limit: int = 10, timeout: float = 10.0):
        self.api_key = api_key
        self.limit = limit
        self.timeout = timeout

    @abstractmethod
    async def search(self, query: str) -> list[SearchResult]:
        """Search the backend for symbols matching ``query``.

        Raises:
            ConfigurationError: the credential is missing or a placeholder.
            TransportError: network failure, non-2xx status or error body.
        """
