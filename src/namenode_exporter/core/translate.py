"""Translation of a decoded JMX envelope into metric samples."""

from collections.abc import Iterable

from namenode_exporter.core.beans import Bean, MappingTable, bean_name, decode_envelope
from namenode_exporter.core.exceptions import CoercionError
from namenode_exporter.core.logs import get_logger
from namenode_exporter.core.mapping import NAMENODE_TABLE, UP
from namenode_exporter.core.metrics import sample
from namenode_exporter.core.models import MetricDescriptor, MetricSample

logger = get_logger(__name__)


def translate_beans(
    beans: Iterable[Bean], table: MappingTable = NAMENODE_TABLE
) -> list[MetricSample]:
    """Emit the samples of every recognized bean.

    Beans are visited in document order and fields in table order. Beans
    without a mapping are skipped, and only the first bean of a given name
    is used. A bean that fails to coerce contributes no samples and does not
    stop the remaining beans.

    Args:
        beans: Decoded beans.
        table: Bean-name keyed mapping table.

    Returns:
        Samples in emission order.
    """
    samples: list[MetricSample] = []
    seen: set[str] = set()
    for bean in beans:
        name = bean_name(bean)
        mapping = table.lookup(name)
        if mapping is None:
            continue
        if mapping.bean_name in seen:
            logger.with_fields(bean=mapping.bean_name).warning(
                "Skipping repeated bean"
            )
            continue
        seen.add(mapping.bean_name)
        try:
            samples.extend(mapping.decode(bean))
        except CoercionError as e:
            logger.with_fields(bean=e.bean_name, field=e.field).warning(
                "Skipping bean with unexpected content: %s", e.reason
            )
    return samples


def translate(
    body: bytes,
    table: MappingTable = NAMENODE_TABLE,
    up: MetricDescriptor = UP,
) -> list[MetricSample]:
    """Translate a raw JMX response body into the samples of one cycle.

    The reachability sample ``up=1`` always comes first.

    Raises:
        DecodeError: The body is not a valid bean envelope.
    """
    beans = decode_envelope(body)
    return [sample(up, 1.0), *translate_beans(beans, table)]
