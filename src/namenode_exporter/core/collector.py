"""Collector that turns one JMX fetch into one set of NameNode samples."""

import time

from namenode_exporter.core.beans import MappingTable
from namenode_exporter.core.exceptions import DecodeError, FetchError
from namenode_exporter.core.logs import get_logger
from namenode_exporter.core.mapping import NAMENODE_TABLE, UP
from namenode_exporter.core.metrics import sample
from namenode_exporter.core.models import MetricDescriptor, MetricSample
from namenode_exporter.core.ports import StatusFetcherPort
from namenode_exporter.core.translate import translate

logger = get_logger(__name__)


class NamenodeCollector:
    """Collects NameNode metrics from its JMX servlet.

    Each call to collect() performs exactly one fetch. A fetch or decode
    failure yields the single sample ``up=0``. The collector keeps no state
    between calls, so overlapping scrapes can share one instance.
    """

    def __init__(
        self,
        fetcher: StatusFetcherPort,
        table: MappingTable = NAMENODE_TABLE,
        up: MetricDescriptor = UP,
    ) -> None:
        """Initialize the collector.

        Args:
            fetcher: Adapter returning the raw JMX document.
            table: Bean-to-metric mapping table.
            up: Descriptor of the reachability gauge.
        """
        self._fetcher = fetcher
        self._table = table
        self._up = up

    def describe(self) -> list[MetricDescriptor]:
        """Announce the reachability gauge and every mapped metric."""
        return [self._up, *self._table.descriptors()]

    async def collect(self) -> list[MetricSample]:
        """Run one fetch, decode and translate cycle."""
        start = time.perf_counter()
        try:
            body = await self._fetcher.fetch()
            samples = translate(body, self._table, self._up)
        except (FetchError, DecodeError) as e:
            logger.error("Failed to collect metrics from namenode: %s", e)
            return [sample(self._up, 0.0)]

        logger.with_fields(
            samples=len(samples), duration_seconds=time.perf_counter() - start
        ).debug("Collected metrics from namenode")
        return samples
