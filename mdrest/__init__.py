"""
mdrest - Market Data REST request and response models

Request-parameter and response-model types for a financial market data REST
API: tickers, ticker news, ticker types and options contracts. Request models
are immutable and built through fluent ``with_*`` setters; response models are
populated by decoding the JSON payload of an endpoint.
"""

__version__ = "0.1.0"
__author__ = "mdrest Team"
