"""Default configuration for building API requests."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class EndpointPaths:
    """Path templates keyed by endpoint name; {name} marks a path-bound parameter."""
    list_tickers: str = "/v3/reference/tickers"
    get_ticker_details: str = "/v3/reference/tickers/{ticker}"
    list_ticker_news: str = "/v2/reference/news"
    get_ticker_types: str = "/v3/reference/tickers/types"
    list_options_contracts: str = "/v3/reference/options/contracts"
    get_options_contract: str = "/v3/reference/options/contracts/{options_ticker}"


@dataclass(frozen=True)
class ClientDefaults:
    """Complete default configuration."""
    base_url: str = "https://api.polygon.io"
    paths: EndpointPaths = field(default_factory=EndpointPaths)


def get_default_config() -> ClientDefaults:
    """Get the default configuration instance."""
    return ClientDefaults(paths=EndpointPaths())
