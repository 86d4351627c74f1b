"""Shared test fixtures for all test modules."""

import logging
from collections.abc import Callable

import httpx
import pytest
from hypothesis import HealthCheck, settings

from namenode_exporter.adapters.http.fetcher import HttpxStatusFetcher
from namenode_exporter.core.collector import NamenodeCollector
from namenode_exporter.core.exceptions import FetchError
from namenode_exporter.core.logs import LOGGER_NAMESPACE
from namenode_exporter.core.registry import CollectorRegistry
from tests.jmx_samples import ALL_BEANS, JMX_URL, envelope

# The autouse logging fixture below only toggles logger flags
settings.register_profile(
    "exporter", suppress_health_check=[HealthCheck.function_scoped_fixture]
)
settings.load_profile("exporter")


class StaticFetcher:
    """Fetcher returning a fixed body or raising a fixed error."""

    def __init__(self, body: bytes = b"", error: Exception | None = None) -> None:
        self.body = body
        self.error = error
        self.calls = 0

    async def fetch(self) -> bytes:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.body


@pytest.fixture(autouse=True)
def _propagate_exporter_logs():
    """Let caplog see exporter records even after configure_logging() ran."""
    logger = logging.getLogger(LOGGER_NAMESPACE)
    handlers, propagate, level = list(logger.handlers), logger.propagate, logger.level
    logger.propagate = True
    yield
    logger.handlers[:] = handlers
    logger.propagate = propagate
    logger.setLevel(level)


@pytest.fixture
def full_body() -> bytes:
    """JMX body containing every recognized bean."""
    return envelope(*ALL_BEANS)


@pytest.fixture
def static_fetcher() -> Callable[..., StaticFetcher]:
    """Factory fixture for StaticFetcher instances."""
    return StaticFetcher


@pytest.fixture
def failing_fetcher() -> StaticFetcher:
    """Fetcher that always fails like a refused connection."""
    return StaticFetcher(error=FetchError("ConnectError: connection refused"))


@pytest.fixture
def mock_jmx():
    """Factory fixture for fetchers backed by httpx.MockTransport.

    Usage:
        async def test_something(mock_jmx):
            async with mock_jmx(lambda request: httpx.Response(200)) as fetcher:
                body = await fetcher.fetch()
    """

    def _fetcher(
        handler: Callable[[httpx.Request], httpx.Response], timeout: float = 5.0
    ) -> HttpxStatusFetcher:
        return HttpxStatusFetcher(
            JMX_URL, timeout=timeout, transport=httpx.MockTransport(handler)
        )

    return _fetcher


@pytest.fixture
def registry_for():
    """Factory fixture building a registry around one NameNode collector."""

    def _registry(fetcher) -> CollectorRegistry:
        registry = CollectorRegistry()
        registry.register(NamenodeCollector(fetcher))
        return registry

    return _registry


# === ASGI Test Fixtures ===


@pytest.fixture
def asgi_scope():
    """Factory fixture for creating ASGI scope dicts.

    Used in tests to create scope dicts with customizable method/path.
    """
    from namenode_exporter.adapters.frameworks.asgi import Scope

    def _scope(method: str = "GET", path: str = "/metrics") -> Scope:
        return {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": b"",
            "headers": [],
        }

    return _scope


@pytest.fixture
def asgi_send_capture():
    """Fixture that returns a send callable and a responses list for capture.

    Returns a tuple of (send_func, responses_list) for recording ASGI messages.
    """

    responses: list[dict[str, object]] = []

    async def send(message: dict[str, object]) -> None:
        """Capture ASGI messages."""
        responses.append(message)

    return send, responses


@pytest.fixture
def asgi_test_client():
    """Factory fixture that creates an httpx.AsyncClient for ASGI testing.

    Returns a callable that accepts an ASGI app and yields a client
    with ASGITransport configured.

    Usage:
        async def test_something(asgi_test_client):
            app = create_asgi_app(registry)
            async with asgi_test_client(app) as client:
                response = await client.get("/metrics")
    """

    def _get_client(app):
        """Return an AsyncClient context manager for the given app."""
        return httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://test"
        )

    return _get_client
