"""Command line entry point for the NameNode exporter."""

import argparse
import asyncio
import sys
from collections.abc import Sequence

import uvicorn

from namenode_exporter.adapters.frameworks.asgi import create_asgi_app
from namenode_exporter.adapters.http.fetcher import HttpxStatusFetcher
from namenode_exporter.adapters.logging import LOG_FORMATS, LOG_LEVELS, configure_logging
from namenode_exporter.adapters.process import ProcessCollector
from namenode_exporter.config import (
    DEFAULT_JMX_URL,
    DEFAULT_LISTEN_ADDRESS,
    DEFAULT_METRICS_PATH,
    ExporterConfig,
    parse_duration,
)
from namenode_exporter.core.collector import NamenodeCollector
from namenode_exporter.core.exceptions import ConfigError
from namenode_exporter.core.logs import get_logger
from namenode_exporter.core.ports import StatusFetcherPort
from namenode_exporter.core.registry import CollectorRegistry
from namenode_exporter.version import __version__, version_info

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="namenode_exporter",
        description="Prometheus exporter for HDFS NameNode JMX metrics",
    )
    parser.add_argument(
        "--namenode.jmx.url",
        dest="jmx_url",
        default=DEFAULT_JMX_URL,
        help="Namenode JMX URL.",
    )
    parser.add_argument(
        "--namenode.jmx.timeout",
        dest="jmx_timeout",
        default="5s",
        help="Timeout reading from namenode JMX URL.",
    )
    parser.add_argument(
        "--namenode.pid-file",
        dest="pid_file",
        default="",
        help="Optional path to a file containing the namenode PID for additional metrics.",
    )
    parser.add_argument(
        "--web.listen-address",
        dest="listen_address",
        default=DEFAULT_LISTEN_ADDRESS,
        help="Address to listen on for web interface and telemetry.",
    )
    parser.add_argument(
        "--web.telemetry-path",
        dest="metrics_path",
        default=DEFAULT_METRICS_PATH,
        help="Path under which to expose metrics.",
    )
    parser.add_argument(
        "--log.level",
        dest="log_level",
        default="info",
        choices=list(LOG_LEVELS),
        help="Only log messages with the given severity or above.",
    )
    parser.add_argument(
        "--log.format",
        dest="log_format",
        default="logfmt",
        choices=list(LOG_FORMATS),
        help="Output format of log messages.",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version information.",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> ExporterConfig:
    """Build a validated configuration from parsed arguments.

    Raises:
        ConfigError: A value failed validation.
    """
    return ExporterConfig(
        jmx_url=args.jmx_url,
        jmx_timeout=parse_duration(args.jmx_timeout),
        pid_file=args.pid_file or None,
        listen_address=args.listen_address,
        metrics_path=args.metrics_path,
        log_level=args.log_level,
        log_format=args.log_format,
    )


def build_registry(
    config: ExporterConfig, fetcher: StatusFetcherPort
) -> CollectorRegistry:
    """Register the NameNode collector and, if configured, the process collector."""
    registry = CollectorRegistry()
    registry.register(NamenodeCollector(fetcher))
    if config.pid_file:
        registry.register(ProcessCollector(config.pid_file))
    return registry


async def serve(config: ExporterConfig) -> None:
    """Serve metrics until the server is asked to stop."""
    async with HttpxStatusFetcher(config.jmx_url, config.jmx_timeout) as fetcher:
        registry = build_registry(config, fetcher)
        app = create_asgi_app(registry, config.metrics_path)
        server = uvicorn.Server(
            uvicorn.Config(
                app,
                host=config.host,
                port=config.port,
                lifespan="off",
                log_config=None,
                access_log=False,
            )
        )
        logger.with_fields(address=config.listen_address).info(
            "Starting HTTP server"
        )
        await server.serve()


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(version_info())
        return 0

    try:
        config = config_from_args(args)
    except ConfigError as e:
        parser.error(str(e))

    configure_logging(config.log_level, config.log_format)
    logger.with_fields(version=__version__).info("Starting namenode_exporter")
    logger.with_fields(
        url=config.jmx_url, timeout_seconds=config.jmx_timeout
    ).info("Scraping namenode JMX endpoint")

    asyncio.run(serve(config))
    return 0


if __name__ == "__main__":
    sys.exit(main())
