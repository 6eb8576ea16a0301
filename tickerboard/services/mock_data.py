"""Bundled sample data served when no market-data credential is configured."""

# Index/fund cards for the dashboard grid.
MOCK_DATA: list[dict] = [
    {
        "symbol": "SPY",
        "name": "SPDR S&P 500 ETF Trust",
        "price": 445.67,
        "change": 2.34,
        "change_percent": 0.53,
        "volume": 45678900,
        "market_cap": 1200000000000,
        "high": 447.23,
        "low": 443.12,
    },
    {
        "symbol": "QQQ",
        "name": "Invesco QQQ Trust",
        "price": 378.45,
        "change": -1.23,
        "change_percent": -0.32,
        "volume": 34567800,
        "market_cap": 850000000000,
        "high": 380.12,
        "low": 376.89,
    },
    {
        "symbol": "IWM",
        "name": "iShares Russell 2000 ETF",
        "price": 198.76,
        "change": 3.45,
        "change_percent": 1.77,
        "volume": 23456700,
        "market_cap": 45000000000,
        "high": 199.23,
        "low": 195.34,
    },
]

# Offline symbol catalogue for the mock search provider.
MOCK_SYMBOLS: list[dict] = [
    {"symbol": sym, "name": name, "type": typ, "region": "United States", "currency": "USD"}
    for sym, name, typ in [
        ("SPY", "SPDR S&P 500 ETF Trust", "ETF"),
        ("QQQ", "Invesco QQQ Trust", "ETF"),
        ("IWM", "iShares Russell 2000 ETF", "ETF"),
        ("DIA", "SPDR Dow Jones Industrial Average ETF", "ETF"),
        ("VTI", "Vanguard Total Stock Market ETF", "ETF"),
        ("AAPL", "Apple Inc", "Equity"),
        ("AA", "Alcoa Corp", "Equity"),
        ("AAL", "American Airlines Group Inc", "Equity"),
        ("AMZN", "Amazon.com Inc", "Equity"),
        ("MSFT", "Microsoft Corporation", "Equity"),
        ("GOOGL", "Alphabet Inc Class A", "Equity"),
        ("NVDA", "NVIDIA Corporation", "Equity"),
        ("TSLA", "Tesla Inc", "Equity"),
        ("VFIAX", "Vanguard 500 Index Fund Admiral Shares", "Mutual Fund"),
        ("TLT", "iShares 20+ Year Treasury Bond ETF", "ETF"),
    ]
]


def default_quote(symbol: str) -> dict:
    """Card for a symbol missing from MOCK_DATA."""
    return {
        "symbol": symbol,
        "name": f"{symbol} Corporation",
        "price": 150.00,
        "change": 2.50,
        "change_percent": 1.69,
        "volume": 1000000,
        "market_cap": 50000000000,
        "high": 152.00,
        "low": 148.50,
    }
