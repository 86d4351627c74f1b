"""ASGI adapter serving the exporter's HTTP endpoints.

This adapter provides a framework-agnostic ASGI application that can be used
with any ASGI server (uvicorn, hypercorn, daphne). The metrics path renders
the registry in Prometheus text format; every other path serves a small
landing page.
"""

import asyncio
import html
import json
from collections.abc import Callable, Coroutine
from typing import Any

from namenode_exporter.core.encoding.prometheus import CONTENT_TYPE, encode_metrics
from namenode_exporter.core.logs import get_logger
from namenode_exporter.core.registry import CollectorRegistry

logger = get_logger(__name__)

# ASGI type aliases
Scope = dict[str, Any]
Receive = Callable[[], Coroutine[Any, Any, dict[str, Any]]]
Send = Callable[[dict[str, Any]], Coroutine[Any, Any, None]]
ASGIApp = Callable[[Scope, Receive, Send], Coroutine[Any, Any, None]]

LANDING_PAGE = """<html>
<head><title>Namenode Exporter</title></head>
<body>
<h1>Namenode Exporter</h1>
<p><a href='{metrics_path}'>Metrics</a></p>
</body>
</html>
"""


async def _send_response(send: Send, status: int, content_type: str, body: str) -> None:
    """Send an HTTP response with headers and body.

    Args:
        send: ASGI send callable for writing response.
        status: HTTP status code.
        content_type: Content-Type header value.
        body: Response body as string (will be encoded to bytes).
    """
    payload = body.encode()
    headers = [
        (b"content-type", content_type.encode()),
        (b"content-length", str(len(payload)).encode()),
    ]
    await send({"type": "http.response.start", "status": status, "headers": headers})
    await send({"type": "http.response.body", "body": payload})


async def _wait_for_disconnect(receive: Receive) -> None:
    """Return once the client has gone away."""
    while True:
        message = await receive()
        if message["type"] == "http.disconnect":
            return


async def _run_unless_disconnected(
    receive: Receive, work: Coroutine[Any, Any, str]
) -> str | None:
    """Run ``work`` and cancel it if the client disconnects first.

    Returns:
        The result of ``work``, or None when the client disconnected.
    """
    task = asyncio.ensure_future(work)
    watcher = asyncio.ensure_future(_wait_for_disconnect(receive))
    try:
        await asyncio.wait({task, watcher}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        for pending in (task, watcher):
            if not pending.done():
                pending.cancel()
        await asyncio.gather(task, watcher, return_exceptions=True)

    if task.cancelled():
        return None
    return task.result()


async def _handle_endpoint(
    send: Send,
    receive: Receive,
    endpoint_func: Callable[[], Coroutine[Any, Any, str]],
    content_type: str,
    log_message: str,
) -> None:
    """Execute an endpoint function with error handling and send response.

    Args:
        send: ASGI send callable for writing response.
        receive: ASGI receive callable, watched for client disconnects.
        endpoint_func: Async function that returns response body.
        content_type: Content-Type header for success response.
        log_message: Message to log on error.
    """
    try:
        body = await _run_unless_disconnected(receive, endpoint_func())
    except Exception:
        logger.exception(log_message)
        error_body = json.dumps({"error": "Internal Server Error"})
        await _send_response(send, 500, "application/json", error_body)
        return

    if body is None:
        logger.debug("Scrape abandoned by client")
        return
    await _send_response(send, 200, content_type, body)


def create_asgi_app(
    registry: CollectorRegistry,
    metrics_path: str = "/metrics",
) -> ASGIApp:
    """Create an ASGI app exposing ``registry`` on ``metrics_path``.

    Args:
        registry: Registry scraped on every request to the metrics path.
        metrics_path: Path serving the Prometheus text format.

    Returns:
        ASGI application callable.
    """
    landing_page = LANDING_PAGE.format(metrics_path=html.escape(metrics_path))

    async def scrape() -> str:
        return encode_metrics(await registry.collect())

    async def app(scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            return

        if scope["path"] == metrics_path:
            await _handle_endpoint(
                send,
                receive,
                scrape,
                CONTENT_TYPE,
                "Error encoding metrics endpoint",
            )
        else:
            await _send_response(send, 200, "text/html; charset=utf-8", landing_page)

    return app
