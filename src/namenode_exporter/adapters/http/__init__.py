"""HTTP client adapters."""

from namenode_exporter.adapters.http.fetcher import HttpxStatusFetcher

__all__ = ["HttpxStatusFetcher"]
