"""BDD step definitions for NameNode collection features."""

import asyncio
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest
from pytest_bdd import given, parsers, then, when

from namenode_exporter.adapters.frameworks.asgi import create_asgi_app
from namenode_exporter.adapters.http.fetcher import HttpxStatusFetcher
from namenode_exporter.core.collector import NamenodeCollector
from namenode_exporter.core.registry import CollectorRegistry
from tests.jmx_samples import ALL_BEANS, JMX_URL, bean, envelope


@dataclass
class CollectionScenarioContext:
    """State shared by the steps of one scenario."""

    beans: list[dict[str, Any]] = field(default_factory=list)
    status: int = 200
    reachable: bool = True
    response: httpx.Response | None = None

    def samples(self) -> dict[str, float]:
        assert self.response is not None
        result = {}
        for line in self.response.text.splitlines():
            if line and not line.startswith("#"):
                name, value = line.split(" ")
                result[name] = float(value)
        return result


async def scrape(ctx: CollectionScenarioContext) -> httpx.Response:
    """Serve one scrape through the ASGI app against a mocked namenode."""

    def namenode(request: httpx.Request) -> httpx.Response:
        if not ctx.reachable:
            raise httpx.ConnectError("connection refused", request=request)
        if ctx.status != 200:
            return httpx.Response(ctx.status, text="<html>Service Unavailable</html>")
        return httpx.Response(200, content=envelope(*ctx.beans))

    transport = httpx.MockTransport(namenode)
    async with HttpxStatusFetcher(JMX_URL, transport=transport) as fetcher:
        registry = CollectorRegistry()
        registry.register(NamenodeCollector(fetcher))
        app = create_asgi_app(registry)
        async with httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://test"
        ) as client:
            return await client.get("/metrics")


@pytest.fixture
def ctx() -> CollectionScenarioContext:
    """Fresh scenario context for each test."""
    return CollectionScenarioContext()


# === Given ===


@given("a namenode serving all standard beans")
def all_standard_beans(ctx: CollectionScenarioContext) -> None:
    ctx.beans = [bean(b) for b in ALL_BEANS]


@given("an unreachable namenode")
def unreachable_namenode(ctx: CollectionScenarioContext) -> None:
    ctx.reachable = False


@given(parsers.parse("a namenode answering with HTTP status {status:d}"))
def namenode_error_status(ctx: CollectionScenarioContext, status: int) -> None:
    ctx.status = status


@given(parsers.parse('the "{short_name}" bean reports "{attr}" as "{value}"'))
def bean_reports(
    ctx: CollectionScenarioContext, short_name: str, attr: str, value: str
) -> None:
    suffix = f"name={short_name}"
    matches = [b for b in ctx.beans if b["name"].endswith(suffix)]
    assert len(matches) == 1, f"no bean named {short_name}"
    matches[0][attr] = value


# === When ===


@when("Prometheus scrapes the exporter")
def prometheus_scrapes(ctx: CollectionScenarioContext) -> None:
    ctx.response = asyncio.run(scrape(ctx))


# === Then ===


@then(parsers.parse("the response status is {code:d}"))
def response_status(ctx: CollectionScenarioContext, code: int) -> None:
    assert ctx.response is not None
    assert ctx.response.status_code == code


@then(parsers.parse('the metric "{name}" is {value:g}'))
def metric_value(ctx: CollectionScenarioContext, name: str, value: float) -> None:
    assert ctx.samples()[name] == value


@then(parsers.parse('the metric "{name}" is absent'))
def metric_absent(ctx: CollectionScenarioContext, name: str) -> None:
    assert name not in ctx.samples()


@then(parsers.parse("{count:d} metrics are exposed"))
def metrics_exposed(ctx: CollectionScenarioContext, count: int) -> None:
    assert len(ctx.samples()) == count
