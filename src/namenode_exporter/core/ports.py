"""Port interfaces for fetchers and collectors.

These protocols define the contracts that adapters must implement.
The core domain depends only on these interfaces, not concrete implementations.
"""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from namenode_exporter.core.models import MetricDescriptor, MetricSample


@runtime_checkable
class StatusFetcherPort(Protocol):
    """Port for reading the raw JMX status document.

    Adapters implementing this protocol perform one request per call.
    Examples: HttpxStatusFetcher.
    """

    async def fetch(self) -> bytes:
        """Return the raw response body.

        Raises:
            FetchError: The document could not be retrieved.
        """
        ...


@runtime_checkable
class CollectorPort(Protocol):
    """Port for anything the registry can scrape.

    Examples: NamenodeCollector, ProcessCollector.
    """

    def describe(self) -> Iterable[MetricDescriptor]:
        """Announce every descriptor collect() may emit."""
        ...

    async def collect(self) -> list[MetricSample]:
        """Produce the samples of one collection cycle.

        Returns:
            Samples in emission order.
        """
        ...
