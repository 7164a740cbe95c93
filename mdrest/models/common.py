"""
Enumerations and the response envelope shared by every endpoint.
"""

from dataclasses import dataclass
from enum import Enum

from .fields import record_field


class Sort(str, Enum):
    """Fields results can be sorted on."""
    TICKER = "ticker"
    NAME = "name"
    MARKET = "market"
    LOCALE = "locale"
    PRIMARY_EXCHANGE = "primary_exchange"
    TYPE = "type"
    CURRENCY_SYMBOL = "currency_symbol"
    CURRENCY_NAME = "currency_name"
    BASE_CURRENCY_SYMBOL = "base_currency_symbol"
    BASE_CURRENCY_NAME = "base_currency_name"
    CIK = "cik"
    COMPOSITE_FIGI = "composite_figi"
    SHARE_CLASS_FIGI = "share_class_figi"
    LAST_UPDATED_UTC = "last_updated_utc"
    DELISTED_UTC = "delisted_utc"
    PUBLISHED_UTC = "published_utc"
    EXPIRATION_DATE = "expiration_date"
    STRIKE_PRICE = "strike_price"
    UNDERLYING_TICKER = "underlying_ticker"


class Order(str, Enum):
    """Sort direction."""
    ASC = "asc"
    DESC = "desc"


class AssetClass(str, Enum):
    """Asset class, also used as the market filter on ticker listings."""
    STOCKS = "stocks"
    OPTIONS = "options"
    CRYPTO = "crypto"
    FX = "fx"
    OTC = "otc"
    INDICES = "indices"


class MarketLocale(str, Enum):
    """Market locale."""
    US = "us"
    GLOBAL = "global"


@dataclass(frozen=True)
class BaseResponse:
    """Envelope fields present on every response."""
    status: str = record_field(default="")
    request_id: str = record_field(default="")
    count: int = record_field(default=0)
    message: str = record_field(default="")
    error_message: str = record_field("error", default="")
