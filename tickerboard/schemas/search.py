from pydantic import BaseModel, Field


class SymbolSearchResponse(BaseModel):
    symbol: str = Field(description="Ticker symbol (e.g. AAPL)")
    name: str = Field(description="Company or fund name")
    display_text: str = Field(description="Symbol as the provider displays it")
    type: str | None = Field(default=None, description="Provider security type (e.g. Equity, ETF)")
    region: str | None = Field(default=None, description="Listing region (e.g. United States)")
    currency: str | None = Field(default=None, description="ISO 4217 currency code")


class SearchProviderInfo(BaseModel):
    key: str
    label: str
    needs_api_key: bool
