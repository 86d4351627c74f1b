"""Core domain models for exported metrics and log records."""

from dataclasses import dataclass, field
from enum import Enum


class MetricKind(Enum):
    """Exposition type of a metric family."""

    GAUGE = "gauge"
    COUNTER = "counter"


@dataclass(frozen=True)
class MetricDescriptor:
    """Immutable identity of an exported metric.

    Attributes:
        name: Fully qualified metric name (e.g., namenode_dfs_blocks_total).
        help: Human-readable description written to the HELP line.
        kind: Gauge or counter.
        label_names: Ordered label names. Empty for every NameNode metric.
    """

    name: str
    help: str
    kind: MetricKind = MetricKind.GAUGE
    label_names: tuple[str, ...] = ()


@dataclass(frozen=True)
class MetricSample:
    """A single metric measurement produced by one collection cycle.

    Attributes:
        descriptor: The announced identity this sample belongs to.
        value: The metric value.
    """

    descriptor: MetricDescriptor
    value: float

    @property
    def name(self) -> str:
        return self.descriptor.name


@dataclass(frozen=True)
class LogEntry:
    """A structured log entry.

    Attributes:
        timestamp: Unix timestamp in seconds.
        level: Log level (e.g., INFO, ERROR, DEBUG).
        message: The log message.
        attributes: Additional structured fields.
    """

    timestamp: float
    level: str
    message: str
    attributes: dict[str, str | int | float | bool] = field(default_factory=dict)
