"""
Options contract reference data models.
"""

import datetime as dt
from dataclasses import dataclass, replace
from typing import Any, Optional

from ..codec.wire import WireFormat
from .common import BaseResponse
from .fields import filter_field, path_field, query_field, record_field
from .filters import FilterField
from .params import RequestParams


@dataclass(frozen=True)
class ListOptionsContractsParams(RequestParams):
    """Parameters for listing options contracts."""

    underlying_ticker: FilterField[str] = filter_field("underlying_ticker")
    contract_type: Optional[str] = query_field("contract_type")    # "call" or "put"
    expiration_date: FilterField[dt.date] = filter_field("expiration_date", WireFormat.DATE)
    strike_price: FilterField[float] = filter_field("strike_price")
    as_of: Optional[dt.date] = query_field("as_of", WireFormat.DATE)
    expired: Optional[bool] = query_field("expired")

    def with_underlying_ticker(self, comparator: Any, value: str) -> "ListOptionsContractsParams":
        return self.with_filter("underlying_ticker", comparator, value)

    def with_contract_type(self, value: str) -> "ListOptionsContractsParams":
        return replace(self, contract_type=value)

    def with_expiration_date(self, comparator: Any, value: dt.date) -> "ListOptionsContractsParams":
        return self.with_filter("expiration_date", comparator, value)

    def with_strike_price(self, comparator: Any, value: float) -> "ListOptionsContractsParams":
        return self.with_filter("strike_price", comparator, value)

    def with_as_of(self, value: dt.date) -> "ListOptionsContractsParams":
        return replace(self, as_of=value)

    def with_expired(self, value: bool) -> "ListOptionsContractsParams":
        return replace(self, expired=value)


@dataclass(frozen=True)
class GetOptionsContractParams(RequestParams):
    """Parameters for a single options contract, e.g. O:EVRI240119C00002500."""

    options_ticker: str = path_field("options_ticker")
    as_of: Optional[dt.date] = query_field("as_of", WireFormat.DATE)   # Today when unset

    def with_as_of(self, value: dt.date) -> "GetOptionsContractParams":
        return replace(self, as_of=value)


@dataclass(frozen=True)
class OptionContractAdditionalUnderlying:
    """Deliverable beyond the primary underlying, e.g. after a corporate action."""
    amount: float = record_field(default=0.0)
    type: str = record_field(default="")
    underlying: str = record_field(default="")


@dataclass(frozen=True)
class OptionContract:
    """Details of an options contract."""
    cfi: str = record_field(default="")
    contract_type: str = record_field(default="")
    exercise_style: str = record_field(default="")
    expiration_date: Optional[dt.date] = record_field(fmt=WireFormat.DATE)
    primary_exchange: str = record_field(default="")
    shares_per_contract: int = record_field(default=0)
    strike_price: float = record_field(default=0.0)
    ticker: str = record_field(default="")
    underlying_ticker: str = record_field(default="")
    additional_underlyings: list[OptionContractAdditionalUnderlying] = record_field(
        default_factory=list
    )


@dataclass(frozen=True)
class ListOptionsContractsResponse(BaseResponse):
    results: list[OptionContract] = record_field(default_factory=list)


@dataclass(frozen=True)
class GetOptionsContractResponse(BaseResponse):
    results: OptionContract = record_field(default_factory=OptionContract)
