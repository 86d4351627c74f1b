"""Exception types raised while collecting NameNode metrics."""


class ExporterError(Exception):
    """Base class for all exporter errors."""


class FetchError(ExporterError):
    """The JMX endpoint could not be read.

    Covers connection failures, timeouts, non-200 responses and body read
    errors. ``status_code`` is set only for non-200 responses.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(ExporterError):
    """The response body is not a well-formed ``{"beans": [...]}`` envelope."""


class CoercionError(ExporterError):
    """A recognized bean is missing a field or holds a value of the wrong type."""

    def __init__(self, bean_name: str, field: str, reason: str) -> None:
        super().__init__(f"bean {bean_name!r} field {field!r}: {reason}")
        self.bean_name = bean_name
        self.field = field
        self.reason = reason


class ConfigError(ExporterError):
    """A configuration value could not be parsed."""


class PidFileError(ExporterError):
    """The PID file could not be read or does not contain a PID."""
