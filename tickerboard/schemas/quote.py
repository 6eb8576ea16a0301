from pydantic import BaseModel, Field


class MarketIndexResponse(BaseModel):
    symbol: str = Field(description="Ticker symbol (e.g. SPY)")
    name: str = Field(description="Index fund name")
    price: float = Field(description="Latest traded price")
    change: float = Field(description="Absolute price change from previous close")
    change_percent: float = Field(description="Percentage change from previous close")
    volume: int = Field(description="Current session trading volume")
    market_cap: float = Field(description="Market capitalization in USD")
    high: float = Field(description="Session high")
    low: float = Field(description="Session low")


class QuoteResponse(BaseModel):
    symbol: str
    price: float = 0.0
    change: float = 0.0
    change_percent: float = 0.0
    high: float = 0.0
    low: float = 0.0
    open: float = 0.0
    previous_close: float = 0.0


class CompanyProfileResponse(BaseModel):
    symbol: str
    name: str
    exchange: str | None = None
    industry: str | None = None
    country: str | None = None
    currency: str | None = None
    ipo: str | None = None
    logo: str | None = None
    weburl: str | None = None
    market_cap: float = Field(default=0.0, description="Market capitalization in the listing currency")


class NewsItemResponse(BaseModel):
    headline: str
    source: str = ""
    summary: str = ""
    url: str = ""
    image: str | None = None
    published_at: int = Field(default=0, description="Unix timestamp (seconds)")


class StockDetailsResponse(BaseModel):
    symbol: str
    quote: QuoteResponse
    profile: CompanyProfileResponse
    news: list[NewsItemResponse] = Field(default_factory=list, description="Up to 10 most recent articles")
    is_placeholder: bool = Field(default=False, description="True when the provider failed and zeros are served")
