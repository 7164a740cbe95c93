#!/usr/bin/env python3
"""
Basic Usage Example - mdrest request and response models

This script shows how to:
- Build parameter objects with comparator filters
- Prepare requests (method, URL, query) without any network I/O
- Decode a canned response payload into typed records

Run: python examples/basic_usage.py
"""

from datetime import date, datetime, timezone

from mdrest.codec.decode import decode_response
from mdrest.endpoints import build_request, endpoint_for
from mdrest.logging import configure_logging
from mdrest.models import (
    AssetClass,
    Comparator,
    GetTickerDetailsParams,
    ListOptionsContractsParams,
    ListTickerNewsParams,
    ListTickersParams,
    Order,
    Sort,
)

SAMPLE_TICKERS_BODY = b"""{
    "status": "OK",
    "request_id": "e70013d92930de90e089dc8fa098888e",
    "count": 2,
    "results": [
        {"ticker": "AAPL", "name": "Apple Inc.", "market": "stocks", "active": true,
         "last_updated_utc": "2022-04-21T00:00:00Z"},
        {"ticker": "AMZN", "name": "Amazon.com, Inc.", "market": "stocks", "active": true}
    ]
}"""


def print_request(label: str, params) -> None:
    """Print the prepared request for a parameter object."""
    request = build_request(params)
    print(f"📨 {label}")
    print(f"  {request.method} {request.url_with_query()}")
    print("-" * 50)


def main() -> None:
    configure_logging(level="DEBUG")

    base = (ListTickersParams()
            .with_market(AssetClass.STOCKS)
            .with_sort(Sort.TICKER)
            .with_order(Order.ASC))

    # Two independent ranges branched from one base request
    print_request("Tickers A-M", base.with_ticker(Comparator.GTE, "A").with_ticker(Comparator.LT, "N"))
    print_request("Tickers N-Z", base.with_ticker(Comparator.GTE, "N"))

    print_request("Ticker details", GetTickerDetailsParams("AAPL").with_date(date(2021, 7, 22)))

    print_request("Recent news", ListTickerNewsParams()
                  .with_ticker(Comparator.EQ, "AAPL")
                  .with_published_utc(Comparator.GTE, datetime(2021, 4, 1, tzinfo=timezone.utc))
                  .with_limit(10))

    print_request("Options chain", ListOptionsContractsParams()
                  .with_underlying_ticker(Comparator.EQ, "AAPL")
                  .with_strike_price(Comparator.GTE, 150.0)
                  .with_strike_price(Comparator.LTE, 160.0)
                  .with_contract_type("call"))

    response = decode_response(SAMPLE_TICKERS_BODY, endpoint_for(base).response_type)
    print(f"📊 Decoded {len(response.results)} tickers (status {response.status})")
    for ticker in response.results:
        updated = ticker.last_updated_utc.isoformat() if ticker.last_updated_utc else "N/A"
        print(f"  {ticker.ticker:6} {ticker.name:20} active={ticker.active} updated={updated}")


if __name__ == "__main__":
    main()
