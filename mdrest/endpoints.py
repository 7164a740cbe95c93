"""
Endpoint registry and request preparation.

Each endpoint pairs an HTTP method and path template with its parameter and
response types. ``build_request`` turns a parameter object into the method,
URL and query an HTTP client needs; it performs no I/O.
"""

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlencode

from .codec.query import build_path, encode_query
from .config.defaults import ClientDefaults, EndpointPaths, get_default_config
from .errors import RequestError
from .logging.config import get_request_logger, log_request_built
from .models.options import (
    GetOptionsContractParams,
    GetOptionsContractResponse,
    ListOptionsContractsParams,
    ListOptionsContractsResponse,
)
from .models.params import RequestParams
from .models.tickers import (
    GetTickerDetailsParams,
    GetTickerDetailsResponse,
    GetTickerTypesParams,
    GetTickerTypesResponse,
    ListTickerNewsParams,
    ListTickerNewsResponse,
    ListTickersParams,
    ListTickersResponse,
)

logger = get_request_logger(__name__)


@dataclass(frozen=True)
class Endpoint:
    """A REST endpoint and the models it speaks."""
    name: str
    method: str
    path: str
    params_type: type
    response_type: type


@dataclass(frozen=True)
class PreparedRequest:
    """Everything an HTTP client needs to issue a request."""
    method: str
    url: str        # base URL + path, without query string
    path: str
    query: dict[str, str]

    def url_with_query(self) -> str:
        """Full URL including the encoded query string."""
        if not self.query:
            return self.url
        return f"{self.url}?{urlencode(self.query)}"


_DEFAULT_PATHS = EndpointPaths()

ENDPOINTS: dict[str, Endpoint] = {
    endpoint.name: endpoint
    for endpoint in (
        Endpoint("list_tickers", "GET", _DEFAULT_PATHS.list_tickers,
                 ListTickersParams, ListTickersResponse),
        Endpoint("get_ticker_details", "GET", _DEFAULT_PATHS.get_ticker_details,
                 GetTickerDetailsParams, GetTickerDetailsResponse),
        Endpoint("list_ticker_news", "GET", _DEFAULT_PATHS.list_ticker_news,
                 ListTickerNewsParams, ListTickerNewsResponse),
        Endpoint("get_ticker_types", "GET", _DEFAULT_PATHS.get_ticker_types,
                 GetTickerTypesParams, GetTickerTypesResponse),
        Endpoint("list_options_contracts", "GET", _DEFAULT_PATHS.list_options_contracts,
                 ListOptionsContractsParams, ListOptionsContractsResponse),
        Endpoint("get_options_contract", "GET", _DEFAULT_PATHS.get_options_contract,
                 GetOptionsContractParams, GetOptionsContractResponse),
    )
}


def get_endpoint(name: str) -> Endpoint:
    """
    Look up a registered endpoint by name.

    Raises:
        KeyError: If no endpoint has that name
    """
    try:
        return ENDPOINTS[name]
    except KeyError:
        raise KeyError(f"Unknown endpoint {name!r}; known: {', '.join(sorted(ENDPOINTS))}") from None


def endpoint_for(params: RequestParams) -> Endpoint:
    """
    Find the endpoint whose parameter type matches ``params``.

    Raises:
        RequestError: If the parameter type belongs to no endpoint
    """
    for endpoint in ENDPOINTS.values():
        if isinstance(params, endpoint.params_type):
            return endpoint
    raise RequestError(f"No endpoint accepts {type(params).__name__}")


def build_request(
    params: RequestParams,
    endpoint: Optional[Endpoint] = None,
    config: Optional[ClientDefaults] = None,
) -> PreparedRequest:
    """
    Prepare the request for a parameter object.

    Args:
        params: Parameter object of the endpoint
        endpoint: Endpoint to call, looked up from the parameter type when omitted
        config: Base URL and path templates, defaults when omitted

    Returns:
        Prepared request with path parameters substituted

    Raises:
        RequestError: If ``params`` does not belong to ``endpoint``
        RequestValidationError: If a required path parameter is empty
    """
    if endpoint is None:
        endpoint = endpoint_for(params)
    elif not isinstance(params, endpoint.params_type):
        raise RequestError(
            f"{endpoint.name} expects {endpoint.params_type.__name__}, "
            f"got {type(params).__name__}",
            context={"endpoint": endpoint.name},
        )

    if config is None:
        config = get_default_config()

    template = getattr(config.paths, endpoint.name, endpoint.path)
    path = build_path(template, params, endpoint=endpoint.name)
    query = encode_query(params)

    log_request_built(logger, endpoint.name, endpoint.method, path, query)

    return PreparedRequest(
        method=endpoint.method,
        url=config.base_url + path,
        path=path,
        query=query,
    )
