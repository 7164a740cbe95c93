"""
Request parameter and response models.

Parameter objects are immutable and built with ``with_*`` setters; response
objects are filled by ``mdrest.codec.decode.decode_response``.
"""

from .common import AssetClass, BaseResponse, MarketLocale, Order, Sort
from .filters import Comparator, FilterField
from .params import RequestParams
from .tickers import (
    Branding,
    CompanyAddress,
    GetTickerDetailsParams,
    GetTickerDetailsResponse,
    GetTickerTypesParams,
    GetTickerTypesResponse,
    ListTickerNewsParams,
    ListTickerNewsResponse,
    ListTickersParams,
    ListTickersResponse,
    Publisher,
    Ticker,
    TickerNews,
    TickerType,
)
from .options import (
    GetOptionsContractParams,
    GetOptionsContractResponse,
    ListOptionsContractsParams,
    ListOptionsContractsResponse,
    OptionContract,
    OptionContractAdditionalUnderlying,
)

__all__ = [
    # Shared
    "AssetClass",
    "BaseResponse",
    "Comparator",
    "FilterField",
    "MarketLocale",
    "Order",
    "RequestParams",
    "Sort",
    # Tickers
    "Branding",
    "CompanyAddress",
    "GetTickerDetailsParams",
    "GetTickerDetailsResponse",
    "GetTickerTypesParams",
    "GetTickerTypesResponse",
    "ListTickerNewsParams",
    "ListTickerNewsResponse",
    "ListTickersParams",
    "ListTickersResponse",
    "Publisher",
    "Ticker",
    "TickerNews",
    "TickerType",
    # Options
    "GetOptionsContractParams",
    "GetOptionsContractResponse",
    "ListOptionsContractsParams",
    "ListOptionsContractsResponse",
    "OptionContract",
    "OptionContractAdditionalUnderlying",
]
