"""JMX envelope decoding and per-bean field coercion.

The NameNode ``/jmx`` servlet answers with ``{"beans": [{...}, ...]}`` where
every bean is an untyped attribute map carrying a ``name`` key. This module
turns the raw bytes into a list of beans and defines how the fields of a
recognized bean are coerced into metric samples.
"""

import json
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from namenode_exporter.core.exceptions import CoercionError, DecodeError
from namenode_exporter.core.metrics import bool_sample, sample
from namenode_exporter.core.models import MetricDescriptor, MetricSample

Bean = dict[str, Any]


def decode_envelope(body: bytes) -> list[Bean]:
    """Decode a JMX response body into its list of beans.

    Args:
        body: Raw response body as returned by the fetcher.

    Returns:
        The beans in document order.

    Raises:
        DecodeError: Malformed JSON, a non-object document, a missing or
            non-list ``beans`` field, or a bean that is not an object.
    """
    # JSONDecodeError is a ValueError, as is the integer digit limit
    try:
        document = json.loads(body)
    except (UnicodeDecodeError, ValueError, RecursionError) as e:
        raise DecodeError(f"malformed JSON: {e}") from e

    if not isinstance(document, dict):
        raise DecodeError("top-level JSON value is not an object")
    beans = document.get("beans")
    if not isinstance(beans, list):
        raise DecodeError("missing 'beans' array")
    for index, bean in enumerate(beans):
        if not isinstance(bean, dict):
            raise DecodeError(f"beans[{index}] is not an object")
    return beans


def bean_name(bean: Bean) -> str | None:
    """Return the dispatch key of a bean, or None when it has no string name."""
    name = bean.get("name")
    return name if isinstance(name, str) else None


class Coercion(Enum):
    """How a source field becomes a float."""

    NUMBER = "number"
    EQUALS = "equals"
    NON_EMPTY = "non_empty"


@dataclass(frozen=True)
class FieldRule:
    """Maps one bean field to one metric.

    Attributes:
        field: Attribute name inside the bean.
        descriptor: Metric the coerced value is emitted as.
        coercion: Coercion applied to the raw value.
        expected: Literal compared against for ``Coercion.EQUALS``.
    """

    field: str
    descriptor: MetricDescriptor
    coercion: Coercion = Coercion.NUMBER
    expected: str | None = None

    def __post_init__(self) -> None:
        if self.coercion is Coercion.EQUALS and self.expected is None:
            raise ValueError(f"rule for {self.field!r} needs an expected value")

    def extract(self, name: str, bean: Mapping[str, Any]) -> MetricSample:
        """Coerce this rule's field of ``bean`` into a sample.

        Raises:
            CoercionError: The field is absent, has the wrong JSON type or
                holds an integer too large for a float.
        """
        if self.field not in bean:
            raise CoercionError(name, self.field, "field is missing")
        value = bean[self.field]

        if self.coercion is Coercion.NUMBER:
            # bool is an int subclass; JSON true/false are not numbers
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise CoercionError(
                    name, self.field, f"expected number, got {type(value).__name__}"
                )
            try:
                return sample(self.descriptor, value)
            except OverflowError:
                raise CoercionError(
                    name, self.field, "number out of float range"
                ) from None

        if not isinstance(value, str):
            raise CoercionError(
                name, self.field, f"expected string, got {type(value).__name__}"
            )
        if self.coercion is Coercion.EQUALS:
            return bool_sample(self.descriptor, value == self.expected)
        return bool_sample(self.descriptor, value != "")


@dataclass(frozen=True)
class BeanMapping:
    """The field rules of one recognized bean, in emission order."""

    bean_name: str
    rules: tuple[FieldRule, ...]

    def decode(self, bean: Mapping[str, Any]) -> tuple[MetricSample, ...]:
        """Strictly decode every field of the bean.

        Either all rules succeed or none of their samples are returned.

        Raises:
            CoercionError: On the first absent or mistyped field.
        """
        return tuple(rule.extract(self.bean_name, bean) for rule in self.rules)


class MappingTable:
    """Immutable bean-name keyed dispatch table."""

    def __init__(self, mappings: Iterable[BeanMapping]) -> None:
        self._mappings = tuple(mappings)
        by_name: dict[str, BeanMapping] = {}
        seen: set[str] = set()
        for mapping in self._mappings:
            if mapping.bean_name in by_name:
                raise ValueError(f"bean {mapping.bean_name!r} already mapped")
            for rule in mapping.rules:
                if rule.descriptor.name in seen:
                    raise ValueError(
                        f"metric {rule.descriptor.name!r} mapped more than once"
                    )
                seen.add(rule.descriptor.name)
            by_name[mapping.bean_name] = mapping
        self._by_name = by_name

    def __iter__(self) -> Iterator[BeanMapping]:
        return iter(self._mappings)

    def __len__(self) -> int:
        return len(self._mappings)

    def lookup(self, name: str | None) -> BeanMapping | None:
        """Return the mapping for a bean name, or None if unrecognized."""
        if name is None:
            return None
        return self._by_name.get(name)

    def descriptors(self) -> list[MetricDescriptor]:
        """Every descriptor the table can emit, in table order."""
        return [rule.descriptor for mapping in self._mappings for rule in mapping.rules]
