"""Pytest configuration and shared fixtures."""

import pytest
from typing import Any, Dict


@pytest.fixture
def ticker_record() -> Dict[str, Any]:
    """Full ticker details record as returned by the API."""
    return {
        "ticker": "AAPL",
        "name": "Apple Inc.",
        "market": "stocks",
        "locale": "us",
        "primary_exchange": "XNAS",
        "type": "CS",
        "active": True,
        "currency_name": "usd",
        "cik": "0000320193",
        "composite_figi": "BBG000B9XRY4",
        "share_class_figi": "BBG001S5N8V8",
        "market_cap": 2771126040150.0,
        "phone_number": "(408) 996-1010",
        "address": {
            "address1": "One Apple Park Way",
            "city": "Cupertino",
            "state": "CA",
            "postal_code": "95014",
        },
        "description": "Apple designs a wide variety of consumer electronic devices.",
        "sic_code": "3571",
        "sic_description": "ELECTRONIC COMPUTERS",
        "ticker_root": "AAPL",
        "homepage_url": "https://www.apple.com",
        "total_employees": 154000,
        "list_date": "1980-12-12",
        "branding": {
            "logo_url": "https://example.com/logo.svg",
            "icon_url": "https://example.com/icon.png",
        },
        "share_class_shares_outstanding": 16406400000,
        "weighted_shares_outstanding": 16334371000,
        "last_updated_utc": "2022-04-21T00:00:00Z",
    }


@pytest.fixture
def news_record() -> Dict[str, Any]:
    """Ticker news article record."""
    return {
        "id": "nJsSJJdwViHZcw5367rZi7_qkXLfMzacXBfpv-vD9UA",
        "publisher": {
            "name": "Benzinga",
            "homepage_url": "https://www.benzinga.com/",
            "logo_url": "https://example.com/benzinga.svg",
            "favicon_url": "https://example.com/benzinga.ico",
        },
        "title": "Cathie Wood Adds More Coinbase",
        "author": "Rachit Vats",
        "published_utc": "2021-04-26T02:33:17Z",
        "article_url": "https://www.benzinga.com/markets/cryptocurrency/21/04/20784086",
        "tickers": ["DOCU", "DDD", "NIU", "ARKF", "NVDA", "SKLZ", "PCAR", "MASS"],
        "amp_url": "https://amp.benzinga.com/amp/content/20784086",
        "image_url": "https://example.com/image.jpeg",
        "description": "Cathie Wood-led Ark Investment Management bought shares.",
        "keywords": ["Sector ETFs", "Penny Stocks", "Cryptocurrency"],
    }


@pytest.fixture
def option_contract_record() -> Dict[str, Any]:
    """Options contract record with an additional underlying."""
    return {
        "cfi": "OCASPS",
        "contract_type": "call",
        "exercise_style": "american",
        "expiration_date": "2024-01-19",
        "primary_exchange": "BATO",
        "shares_per_contract": 100,
        "strike_price": 2.5,
        "ticker": "O:EVRI240119C00002500",
        "underlying_ticker": "EVRI",
        "additional_underlyings": [
            {"amount": 44, "type": "equity", "underlying": "VMW"},
            {"amount": 6.53, "type": "currency", "underlying": "USD"},
        ],
    }


@pytest.fixture
def envelope() -> Dict[str, Any]:
    """Successful response envelope without results."""
    return {
        "status": "OK",
        "request_id": "31d59dda-80e5-4721-8496-d0d32a654afe",
        "count": 1,
    }
