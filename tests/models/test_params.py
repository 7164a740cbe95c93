"""Tests for copy-on-write request parameter objects."""

import itertools
from datetime import date, datetime, timezone

import pytest

from mdrest.errors import UnknownFilterError, UnknownOptionError, UnsupportedComparatorError
from mdrest.models import (
    GetOptionsContractParams,
    GetTickerDetailsParams,
    GetTickerTypesParams,
    ListOptionsContractsParams,
    ListTickerNewsParams,
    ListTickersParams,
)
from mdrest.models.filters import Comparator

# (params type, filter field, two distinct sample values)
FILTER_CASES = [
    (ListTickersParams, "ticker", "AAPL", "MSFT"),
    (ListTickerNewsParams, "ticker", "AAPL", "MSFT"),
    (ListTickerNewsParams, "published_utc",
     datetime(2021, 4, 1, tzinfo=timezone.utc), datetime(2021, 5, 1, tzinfo=timezone.utc)),
    (ListOptionsContractsParams, "underlying_ticker", "EVRI", "VMW"),
    (ListOptionsContractsParams, "expiration_date", date(2024, 1, 19), date(2024, 6, 21)),
    (ListOptionsContractsParams, "strike_price", 2.5, 150.0),
]

COMPARATOR_PAIRS = [
    (c1, c2) for c1, c2 in itertools.product(Comparator, repeat=2) if c1 is not c2
]


class TestWithFilter:
    """Test the generic with_filter builder."""

    @pytest.mark.parametrize("params_type,field_name,v1,v2", FILTER_CASES)
    @pytest.mark.parametrize("c1,c2", COMPARATOR_PAIRS)
    def test_distinct_comparators_are_independent(self, params_type, field_name, v1, v2, c1, c2):
        """Setting a second comparator never overwrites the first."""
        params = params_type().with_filter(field_name, c1, v1).with_filter(field_name, c2, v2)
        f = getattr(params, field_name)

        assert f.get(c1) == v1
        assert f.get(c2) == v2
        assert len(list(f.items())) == 2

    @pytest.mark.parametrize("params_type,field_name,v1,v2", FILTER_CASES)
    def test_receiver_unchanged(self, params_type, field_name, v1, v2):
        """The receiver keeps its values after a builder call."""
        base = params_type().with_filter(field_name, Comparator.EQ, v1)
        snapshot = params_type().with_filter(field_name, Comparator.EQ, v1)

        derived = base.with_filter(field_name, Comparator.EQ, v2)

        assert base == snapshot
        assert getattr(base, field_name).eq == v1
        assert getattr(derived, field_name).eq == v2

    @pytest.mark.parametrize("params_type,field_name,v1,v2", FILTER_CASES)
    def test_idempotent(self, params_type, field_name, v1, v2):
        """Applying the same filter twice equals applying it once."""
        once = params_type().with_filter(field_name, Comparator.LTE, v1)
        twice = once.with_filter(field_name, Comparator.LTE, v1)
        assert once == twice

    def test_other_fields_preserved(self):
        """A filter update keeps options and other filters."""
        params = (ListOptionsContractsParams()
                  .with_expired(True)
                  .with_strike_price(Comparator.GT, 100.0)
                  .with_underlying_ticker(Comparator.EQ, "AAPL"))

        assert params.expired is True
        assert params.strike_price.gt == 100.0
        assert params.underlying_ticker.eq == "AAPL"
        assert not params.expiration_date

    def test_unknown_filter_field(self):
        """Scalar options and missing names are not filters."""
        with pytest.raises(UnknownFilterError) as exc_info:
            ListTickersParams().with_filter("limit", Comparator.EQ, 10)

        assert exc_info.value.field == "limit"
        assert exc_info.value.params_type == "ListTickersParams"

        with pytest.raises(UnknownFilterError):
            ListTickersParams().with_filter("strike_price", Comparator.EQ, 10.0)

    def test_unsupported_comparator_raises(self):
        """An unsupported comparator is reported, not silently dropped."""
        base = ListTickersParams()
        with pytest.raises(UnsupportedComparatorError):
            base.with_ticker("ne", "AAPL")
        assert base == ListTickersParams()

    def test_string_comparators(self):
        """Wire text works anywhere a Comparator does."""
        params = ListTickersParams().with_ticker("gte", "A").with_ticker("", "B")
        assert params.ticker.gte == "A"
        assert params.ticker.eq == "B"


class TestScalarSetters:
    """Test plain with_* option setters."""

    def test_setter_returns_new_object(self):
        """Scalar setters copy, never mutate."""
        base = ListTickersParams()
        limited = base.with_limit(50)

        assert base.limit is None
        assert limited.limit == 50
        assert limited is not base

    def test_zero_limit_distinct_from_unset(self):
        """An explicit zero is kept as a value."""
        assert ListTickersParams().with_limit(0).limit == 0
        assert ListTickersParams().limit is None

    def test_branching_base_request(self):
        """One base object can feed several independent requests."""
        base = ListTickersParams().with_active(True)
        stocks = base.with_search("apple")
        limited = base.with_limit(5)

        assert stocks.search == "apple" and stocks.limit is None
        assert limited.limit == 5 and limited.search is None
        assert base.search is None and base.limit is None

    def test_params_are_frozen(self):
        """Assigning to a field raises."""
        params = ListTickersParams()
        with pytest.raises(AttributeError):
            params.limit = 10

    def test_with_options(self):
        """with_options replaces several scalar options at once."""
        params = GetTickerTypesParams().with_options(asset_class="stocks", locale="us")
        assert params.asset_class == "stocks"
        assert params.locale == "us"

    @pytest.mark.parametrize("name,value", [
        ("ticker", "AAPL"),
        ("limit_per_page", 10),
    ])
    def test_with_options_rejects_non_options(self, name, value):
        """Filters and unknown names cannot be set as plain options."""
        with pytest.raises(UnknownOptionError) as exc_info:
            ListTickersParams().with_options(**{name: value})

        assert exc_info.value.field == name
        assert exc_info.value.params_type == "ListTickersParams"

    def test_with_options_rejects_path_values(self):
        with pytest.raises(UnknownOptionError):
            GetTickerDetailsParams().with_options(ticker="AAPL")


class TestFieldIntrospection:
    """Test field kind helpers."""

    def test_filter_names(self):
        assert ListTickersParams.filter_names() == ("ticker",)
        assert ListTickerNewsParams.filter_names() == ("ticker", "published_utc")
        assert ListOptionsContractsParams.filter_names() == (
            "underlying_ticker", "expiration_date", "strike_price")
        assert GetTickerTypesParams.filter_names() == ()

    def test_path_names(self):
        assert GetTickerDetailsParams.path_names() == {"ticker": "ticker"}
        assert GetOptionsContractParams.path_names() == {"options_ticker": "options_ticker"}
        assert ListTickersParams.path_names() == {}

    def test_query_names(self):
        assert GetTickerDetailsParams.query_names() == ("date",)
        assert "limit" in ListTickersParams.query_names()
        assert "ticker" not in ListTickersParams.query_names()
