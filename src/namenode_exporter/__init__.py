"""Prometheus exporter for HDFS NameNode JMX metrics."""

from namenode_exporter.core.collector import NamenodeCollector
from namenode_exporter.core.logs import get_logger
from namenode_exporter.core.models import MetricDescriptor, MetricKind, MetricSample
from namenode_exporter.core.registry import CollectorRegistry
from namenode_exporter.core.translate import translate
from namenode_exporter.version import __version__

__all__ = [
    "CollectorRegistry",
    "MetricDescriptor",
    "MetricKind",
    "MetricSample",
    "NamenodeCollector",
    "__version__",
    "get_logger",
    "translate",
]
