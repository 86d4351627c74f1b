"""Prometheus text format encoder for metric samples."""

import math
from collections.abc import Iterable

from namenode_exporter.core.models import MetricSample

CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"


def _format_value(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return repr(float(value))


def _escape_help(text: str) -> str:
    return text.replace("\\", "\\\\").replace("\n", "\\n")


def encode_metrics(samples: Iterable[MetricSample]) -> str:
    """Encode metric samples to Prometheus text exposition format.

    Samples are grouped into families by metric name. Families appear in the
    order their first sample was seen, each preceded by HELP and TYPE lines.

    Args:
        samples: An iterable of MetricSample objects.

    Returns:
        Prometheus text format string. Empty string if no samples.
    """
    families: dict[str, list[MetricSample]] = {}
    for sample in samples:
        families.setdefault(sample.name, []).append(sample)

    lines: list[str] = []
    for name, members in families.items():
        descriptor = members[0].descriptor
        lines.append(f"# HELP {name} {_escape_help(descriptor.help)}")
        lines.append(f"# TYPE {name} {descriptor.kind.value}")
        for member in members:
            lines.append(f"{name} {_format_value(member.value)}")

    if not lines:
        return ""

    return "\n".join(lines) + "\n"
