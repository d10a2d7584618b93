"""
Network Layer.

This package is responsible for retrieving link content over HTTP.
"""

from .fetcher import FetchResult, HttpFetcher

__all__ = ["FetchResult", "HttpFetcher"]
