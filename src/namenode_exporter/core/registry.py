"""Registry of collectors scraped by the metrics endpoint."""

from namenode_exporter.core.logs import get_logger
from namenode_exporter.core.models import MetricDescriptor, MetricSample
from namenode_exporter.core.ports import CollectorPort

logger = get_logger(__name__)


class CollectorRegistry:
    """Explicit collection of collectors.

    The registry is built once at startup and handed to the HTTP layer.
    Descriptor names are checked for uniqueness at registration time, and
    a scrape only ever returns samples of announced descriptors.
    """

    def __init__(self) -> None:
        self._collectors: list[CollectorPort] = []
        self._announced: dict[str, MetricDescriptor] = {}

    def register(self, collector: CollectorPort) -> None:
        """Register a collector.

        Raises:
            TypeError: The object does not implement describe() and collect().
            ValueError: A descriptor name is already registered.
        """
        if not isinstance(collector, CollectorPort):
            raise TypeError("collector must implement describe() and collect()")

        descriptors = list(collector.describe())
        names = [d.name for d in descriptors]
        for name in names:
            if name in self._announced or names.count(name) > 1:
                raise ValueError(f"metric {name!r} already registered")

        self._collectors.append(collector)
        self._announced.update((d.name, d) for d in descriptors)

    def describe(self) -> list[MetricDescriptor]:
        """Every announced descriptor, in registration order."""
        return list(self._announced.values())

    async def collect(self) -> list[MetricSample]:
        """Scrape every collector in registration order.

        A collector that raises is logged and skipped; the others still
        contribute their samples.
        """
        samples: list[MetricSample] = []
        for collector in self._collectors:
            try:
                collected = await collector.collect()
            except Exception:
                logger.exception(
                    "Collector %s failed", type(collector).__name__
                )
                continue
            for item in collected:
                if self._announced.get(item.name) != item.descriptor:
                    logger.with_fields(metric=item.name).error(
                        "Dropping sample of unannounced metric"
                    )
                    continue
                samples.append(item)
        return samples
