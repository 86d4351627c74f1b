"""Metric helper functions for creating descriptors and samples."""

from namenode_exporter.core.models import MetricDescriptor, MetricKind, MetricSample


def build_fq_name(namespace: str, subsystem: str, name: str) -> str:
    """Join the non-empty name parts with underscores.

    Args:
        namespace: Metric namespace (e.g., "namenode")
        subsystem: Optional subsystem (e.g., "dfs"); empty string to skip
        name: Short metric name (e.g., "blocks_total")

    Returns:
        Fully qualified metric name such as "namenode_dfs_blocks_total"
    """
    return "_".join(part for part in (namespace, subsystem, name) if part)


def gauge_descriptor(
    namespace: str, subsystem: str, name: str, help: str
) -> MetricDescriptor:
    """Create a gauge descriptor with a fully qualified name."""
    return MetricDescriptor(
        name=build_fq_name(namespace, subsystem, name),
        help=help,
        kind=MetricKind.GAUGE,
    )


def counter_descriptor(
    namespace: str, subsystem: str, name: str, help: str
) -> MetricDescriptor:
    """Create a counter descriptor with a fully qualified name."""
    return MetricDescriptor(
        name=build_fq_name(namespace, subsystem, name),
        help=help,
        kind=MetricKind.COUNTER,
    )


def sample(descriptor: MetricDescriptor, value: float) -> MetricSample:
    """Create a metric sample for an announced descriptor.

    Args:
        descriptor: Metric identity the value belongs to
        value: Current value

    Returns:
        MetricSample with the value coerced to float
    """
    return MetricSample(descriptor=descriptor, value=float(value))


def bool_sample(descriptor: MetricDescriptor, flag: bool) -> MetricSample:
    """Create a sample of 1.0 for True and 0.0 for False."""
    return sample(descriptor, 1.0 if flag else 0.0)
