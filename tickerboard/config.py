from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    finnhub_api_key: str = "YOUR_FINNHUB_API_KEY_HERE"
    alphavantage_api_key: str = "demo"
    search_provider: str = "alphavantage"
    search_min_query_length: int = 2
    search_debounce_ms: int = 300
    search_result_limit: int = 10
    search_enter_selects_raw_query: bool = True
    market_refresh_seconds: int = 30
    http_timeout: float = 10.0

    model_config = {"env_prefix": ""}


settings = Settings()
