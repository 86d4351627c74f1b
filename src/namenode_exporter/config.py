"""Exporter configuration, fixed for the lifetime of the process."""

import math
import re
from dataclasses import dataclass
from urllib.parse import urlsplit

from namenode_exporter.adapters.logging import LOG_FORMATS, LOG_LEVELS
from namenode_exporter.core.exceptions import ConfigError

DEFAULT_JMX_URL = "http://localhost:50070/jmx"
DEFAULT_JMX_TIMEOUT = 5.0
DEFAULT_LISTEN_ADDRESS = ":9779"
DEFAULT_METRICS_PATH = "/metrics"

_DURATION_PART = re.compile(r"(\d+(?:\.\d+)?)(ms|us|µs|ns|h|m|s)")
_UNIT_SECONDS = {
    "h": 3600.0,
    "m": 60.0,
    "s": 1.0,
    "ms": 1e-3,
    "us": 1e-6,
    "µs": 1e-6,
    "ns": 1e-9,
}


def parse_duration(text: str) -> float:
    """Parse a duration such as ``5s``, ``500ms`` or ``1m30s`` into seconds.

    A bare number is taken as seconds.

    Raises:
        ConfigError: The text is not a positive duration.
    """
    text = text.strip()
    try:
        seconds = float(text)
    except ValueError:
        pos = 0
        seconds = 0.0
        for match in _DURATION_PART.finditer(text):
            if match.start() != pos:
                break
            seconds += float(match.group(1)) * _UNIT_SECONDS[match.group(2)]
            pos = match.end()
        if pos == 0 or pos != len(text):
            raise ConfigError(f"invalid duration {text!r}") from None
    if not math.isfinite(seconds) or seconds <= 0:
        raise ConfigError(f"duration must be positive, got {text!r}")
    return seconds


def parse_listen_address(address: str) -> tuple[str, int]:
    """Split ``host:port`` into its parts.

    An empty host (``:9779``) listens on all interfaces. IPv6 hosts are
    written in brackets (``[::1]:9779``).

    Raises:
        ConfigError: Missing or invalid port.
    """
    host, sep, port_text = address.rpartition(":")
    if not sep:
        raise ConfigError(f"listen address {address!r} has no port")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    try:
        port = int(port_text)
    except ValueError:
        raise ConfigError(f"invalid port in listen address {address!r}") from None
    if not 0 <= port <= 65535:
        raise ConfigError(f"port out of range in listen address {address!r}")
    return host or "0.0.0.0", port


@dataclass(frozen=True)
class ExporterConfig:
    """Validated exporter settings.

    Attributes:
        jmx_url: NameNode JMX URL.
        jmx_timeout: Seconds allowed for one JMX request.
        pid_file: Optional path to a file holding the NameNode PID.
        listen_address: Address of the HTTP listener.
        metrics_path: Path serving the metrics.
        log_level: One of debug, info, warn, error, fatal.
        log_format: Either logfmt or json.
    """

    jmx_url: str = DEFAULT_JMX_URL
    jmx_timeout: float = DEFAULT_JMX_TIMEOUT
    pid_file: str | None = None
    listen_address: str = DEFAULT_LISTEN_ADDRESS
    metrics_path: str = DEFAULT_METRICS_PATH
    log_level: str = "info"
    log_format: str = "logfmt"

    def __post_init__(self) -> None:
        parts = urlsplit(self.jmx_url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ConfigError(f"JMX URL must be an absolute http(s) URL: {self.jmx_url!r}")
        if self.jmx_timeout <= 0:
            raise ConfigError("JMX timeout must be positive")
        if not self.metrics_path.startswith("/"):
            raise ConfigError(f"metrics path must start with '/': {self.metrics_path!r}")
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"unknown log level {self.log_level!r}")
        if self.log_format not in LOG_FORMATS:
            raise ConfigError(f"unknown log format {self.log_format!r}")
        parse_listen_address(self.listen_address)

    @property
    def host(self) -> str:
        return parse_listen_address(self.listen_address)[0]

    @property
    def port(self) -> int:
        return parse_listen_address(self.listen_address)[1]
