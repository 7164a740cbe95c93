"""
Ticker reference data models.

Covers the ticker listing, ticker details, ticker news and ticker types
endpoints: their parameter objects and the records their responses carry.
"""

import datetime as dt
from dataclasses import dataclass, replace
from typing import Any, Optional

from ..codec.wire import WireFormat
from .common import AssetClass, BaseResponse, MarketLocale, Order, Sort
from .fields import filter_field, path_field, query_field, record_field
from .filters import FilterField
from .params import RequestParams


@dataclass(frozen=True)
class ListTickersParams(RequestParams):
    """Parameters for listing tickers."""

    # Ticker symbol filter; unset queries all tickers
    ticker: FilterField[str] = filter_field("ticker")

    type: Optional[str] = query_field("type")                      # See the ticker types endpoint
    market: Optional[AssetClass] = query_field("market")           # All markets when unset
    exchange: Optional[int] = query_field("exchange")              # Primary exchange ISO code
    cusip: Optional[int] = query_field("cusip")                    # Queryable, never returned
    cik: Optional[int] = query_field("cik")
    date: Optional[dt.date] = query_field("date", WireFormat.DATE) # Point in time, latest when unset
    active: Optional[bool] = query_field("active")                 # Server default is true
    search: Optional[str] = query_field("search")                  # Matches ticker and company name

    # Sort is ignored by the server when search is present
    sort: Optional[Sort] = query_field("sort")
    order: Optional[Order] = query_field("order")
    limit: Optional[int] = query_field("limit")                    # Server default 100, max 1000

    def with_ticker(self, comparator: Any, value: str) -> "ListTickersParams":
        return self.with_filter("ticker", comparator, value)

    def with_type(self, value: str) -> "ListTickersParams":
        return replace(self, type=value)

    def with_market(self, value: AssetClass) -> "ListTickersParams":
        return replace(self, market=value)

    def with_exchange(self, value: int) -> "ListTickersParams":
        return replace(self, exchange=value)

    def with_cusip(self, value: int) -> "ListTickersParams":
        return replace(self, cusip=value)

    def with_cik(self, value: int) -> "ListTickersParams":
        return replace(self, cik=value)

    def with_date(self, value: dt.date) -> "ListTickersParams":
        return replace(self, date=value)

    def with_active(self, value: bool) -> "ListTickersParams":
        return replace(self, active=value)

    def with_search(self, value: str) -> "ListTickersParams":
        return replace(self, search=value)

    def with_sort(self, value: Sort) -> "ListTickersParams":
        return replace(self, sort=value)

    def with_order(self, value: Order) -> "ListTickersParams":
        return replace(self, order=value)

    def with_limit(self, value: int) -> "ListTickersParams":
        return replace(self, limit=value)


@dataclass(frozen=True)
class GetTickerDetailsParams(RequestParams):
    """
    Parameters for the details of a single ticker.

    ``date`` asks for the details as known on that day. Details derived from
    SEC filings are matched on the filing's period-of-report date, not its
    submission date.
    """

    ticker: str = path_field("ticker")
    date: Optional[dt.date] = query_field("date", WireFormat.DATE)

    def with_date(self, value: dt.date) -> "GetTickerDetailsParams":
        return replace(self, date=value)


@dataclass(frozen=True)
class ListTickerNewsParams(RequestParams):
    """Parameters for listing news articles that mention tickers."""

    ticker: FilterField[str] = filter_field("ticker")
    published_utc: FilterField[dt.datetime] = filter_field("published_utc", WireFormat.MILLIS)

    sort: Optional[Sort] = query_field("sort")
    order: Optional[Order] = query_field("order")
    limit: Optional[int] = query_field("limit")                    # Server default 10, max 1000

    def with_ticker(self, comparator: Any, value: str) -> "ListTickerNewsParams":
        return self.with_filter("ticker", comparator, value)

    def with_published_utc(self, comparator: Any, value: dt.datetime) -> "ListTickerNewsParams":
        return self.with_filter("published_utc", comparator, value)

    def with_sort(self, value: Sort) -> "ListTickerNewsParams":
        return replace(self, sort=value)

    def with_order(self, value: Order) -> "ListTickerNewsParams":
        return replace(self, order=value)

    def with_limit(self, value: int) -> "ListTickerNewsParams":
        return replace(self, limit=value)


@dataclass(frozen=True)
class GetTickerTypesParams(RequestParams):
    """Parameters for listing the ticker types the API understands."""

    asset_class: Optional[AssetClass] = query_field("asset_class")
    locale: Optional[MarketLocale] = query_field("locale")

    def with_asset_class(self, value: AssetClass) -> "GetTickerTypesParams":
        return replace(self, asset_class=value)

    def with_locale(self, value: MarketLocale) -> "GetTickerTypesParams":
        return replace(self, locale=value)


@dataclass(frozen=True)
class CompanyAddress:
    """Physical address of a company."""
    address1: str = record_field(default="")
    address2: str = record_field(default="")
    city: str = record_field(default="")
    postal_code: str = record_field(default="")
    state: str = record_field(default="")


@dataclass(frozen=True)
class Branding:
    """Brand assets of a company."""
    logo_url: str = record_field(default="")
    icon_url: str = record_field(default="")


@dataclass(frozen=True)
class Ticker:
    """Detailed information on a ticker symbol. CUSIP is never returned."""
    active: bool = record_field(default=False, omit_empty=False)
    address: CompanyAddress = record_field(default_factory=CompanyAddress)
    branding: Branding = record_field(default_factory=Branding)
    cik: str = record_field(default="")
    composite_figi: str = record_field(default="")
    currency_name: str = record_field(default="")
    delisted_utc: Optional[dt.datetime] = record_field(fmt=WireFormat.TIME)
    description: str = record_field(default="")
    homepage_url: str = record_field(default="")
    last_updated_utc: Optional[dt.datetime] = record_field(fmt=WireFormat.TIME)
    list_date: Optional[dt.date] = record_field(fmt=WireFormat.DATE)
    locale: str = record_field(default="")
    market: str = record_field(default="")
    market_cap: float = record_field(default=0.0)
    name: str = record_field(default="")
    phone_number: str = record_field(default="")
    primary_exchange: str = record_field(default="")
    share_class_figi: str = record_field(default="")
    share_class_shares_outstanding: int = record_field(default=0)
    sic_code: str = record_field(default="")
    sic_description: str = record_field(default="")
    ticker: str = record_field(default="")
    ticker_root: str = record_field(default="")
    ticker_suffix: str = record_field(default="")
    total_employees: int = record_field(default=0)
    type: str = record_field(default="")
    weighted_shares_outstanding: int = record_field(default=0)


@dataclass(frozen=True)
class Publisher:
    """Publisher of a news article."""
    favicon_url: str = record_field(default="")
    homepage_url: str = record_field(default="")
    logo_url: str = record_field(default="")
    name: str = record_field(default="")


@dataclass(frozen=True)
class TickerNews:
    """A news article and the tickers it mentions."""
    amp_url: str = record_field(default="")
    article_url: str = record_field(default="")
    author: str = record_field(default="")
    description: str = record_field(default="")
    id: str = record_field(default="")
    image_url: str = record_field(default="")
    keywords: list[str] = record_field(default_factory=list)
    published_utc: Optional[dt.datetime] = record_field(fmt=WireFormat.TIME)
    publisher: Publisher = record_field(default_factory=Publisher)
    tickers: list[str] = record_field(default_factory=list)
    title: str = record_field(default="")


@dataclass(frozen=True)
class TickerType:
    """A ticker type code and what it means."""
    asset_class: str = record_field(default="")
    code: str = record_field(default="")
    description: str = record_field(default="")
    locale: str = record_field(default="")


@dataclass(frozen=True)
class ListTickersResponse(BaseResponse):
    results: list[Ticker] = record_field(default_factory=list)


@dataclass(frozen=True)
class GetTickerDetailsResponse(BaseResponse):
    results: Ticker = record_field(default_factory=Ticker)


@dataclass(frozen=True)
class ListTickerNewsResponse(BaseResponse):
    results: list[TickerNews] = record_field(default_factory=list)


@dataclass(frozen=True)
class GetTickerTypesResponse(BaseResponse):
    results: list[TickerType] = record_field(default_factory=list)
