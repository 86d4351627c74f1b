"""Structured logger used throughout the exporter."""

import logging
from collections.abc import MutableMapping
from typing import Any

LOGGER_NAMESPACE = "namenode_exporter"


class StructuredLogger(logging.LoggerAdapter):  # type: ignore[type-arg]
    """Logger adapter that attaches structured fields to every record.

    Example:
        ```python
        logger = get_logger(__name__)
        logger.with_fields(url=url).error("Failed to collect metrics")
        ```
    """

    def __init__(
        self,
        logger: logging.Logger,
        fields: dict[str, str | int | float | bool] | None = None,
    ) -> None:
        super().__init__(logger, fields or {})

    @property
    def fields(self) -> dict[str, str | int | float | bool]:
        return dict(self.extra or {})  # type: ignore[arg-type]

    def with_fields(self, **fields: str | int | float | bool) -> "StructuredLogger":
        """Return a logger that adds ``fields`` to the current ones."""
        return StructuredLogger(self.logger, {**self.fields, **fields})

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        # Call-site extra wins over bound fields
        kwargs["extra"] = {**self.fields, **kwargs.get("extra", {})}
        return msg, kwargs


def get_logger(name: str) -> StructuredLogger:
    """Return a structured logger for ``name``.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        StructuredLogger with no bound fields
    """
    return StructuredLogger(logging.getLogger(name))
