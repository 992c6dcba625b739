"""
Prometheus HTTP metrics.

`HttpMetrics` owns one `CollectorRegistry` per app: the request-latency
histogram plus the process/platform/GC collectors, all named under the
configured prefix. `MetricsMiddleware` times every HTTP request except the
scrape endpoints, and `router` serves the registry in the text exposition
format.
"""

from __future__ import annotations

import time
from typing import Any, Awaitable, Callable, Iterable

from fastapi import APIRouter, Depends, Request, Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    GCCollector,
    Histogram,
    PlatformCollector,
    ProcessCollector,
    generate_latest,
)
from prometheus_client.metrics_core import Metric
from prometheus_client.registry import Collector

SCRAPE_PATHS = ("/metrics", "/api/metrics")
LATENCY_BUCKETS = (0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2, 5)

Scope = dict[str, Any]
Message = dict[str, Any]
Receive = Callable[[], Awaitable[Message]]
Send = Callable[[Message], Awaitable[None]]
ASGIApp = Callable[[Scope, Receive, Send], Awaitable[None]]


class PrefixedCollector(Collector):
    """
    Re-emits the families of unregistered collectors under `<prefix>_`.
    """

    def __init__(self, prefix: str, *collectors: Collector) -> None:
        self._prefix = f"{prefix}_" if prefix else ""
        self._collectors = collectors

    def collect(self) -> Iterable[Metric]:
        for collector in self._collectors:
            for family in collector.collect():
                renamed = Metric(self._prefix + family.name, family.documentation, family.type, family.unit)
                renamed.samples = [s._replace(name=self._prefix + s.name) for s in family.samples]
                yield renamed


class HttpMetrics:
    def __init__(self, *, prefix: str = "playsafe", registry: CollectorRegistry | None = None) -> None:
        self.registry = registry if registry is not None else CollectorRegistry()
        ProcessCollector(namespace=prefix, registry=self.registry)
        scratch = CollectorRegistry()
        self.registry.register(
            PrefixedCollector(prefix, PlatformCollector(registry=scratch), GCCollector(registry=scratch))
        )
        self.request_duration = Histogram(
            "http_request_duration_seconds",
            "HTTP request latency in seconds",
            labelnames=("method", "route", "code"),
            buckets=LATENCY_BUCKETS,
            registry=self.registry,
        )

    def observe(self, *, method: str, route: str, code: int, seconds: float) -> None:
        self.request_duration.labels(method, route, str(code)).observe(seconds)

    def render(self) -> bytes:
        return generate_latest(self.registry)


def _route_template(scope: Scope) -> str:
    # FastAPI stores the matched route in the scope; unmatched paths fall back to the raw path.
    route = scope.get("route")
    return getattr(route, "path", None) or scope.get("path") or "unknown"


class MetricsMiddleware:
    """
    Pure ASGI middleware; the observation is recorded once the response
    has been fully sent (or the app raised).
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        metrics: HttpMetrics,
        skip_paths: Iterable[str] = SCRAPE_PATHS,
    ) -> None:
        self.app = app
        self.metrics = metrics
        self.skip_paths = frozenset(skip_paths)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope.get("path") in self.skip_paths:
            await self.app(scope, receive, send)
            return

        status_code = 500
        start = time.perf_counter()

        async def send_wrapper(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = int(message["status"])
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            self.metrics.observe(
                method=scope.get("method", "GET"),
                route=_route_template(scope),
                code=status_code,
                seconds=time.perf_counter() - start,
            )


def _metrics_dependency(request: Request) -> HttpMetrics:
    return request.app.state.metrics


router = APIRouter()


@router.get("/metrics", include_in_schema=False)
async def scrape_metrics(metrics: HttpMetrics = Depends(_metrics_dependency)) -> Response:
    return Response(content=metrics.render(), media_type=CONTENT_TYPE_LATEST)


@router.get(
    "/api/metrics",
    summary="Prometheus metrics",
    description="Process and HTTP latency metrics in the Prometheus text exposition format.",
    response_class=Response,
    responses={200: {"content": {"text/plain": {}}}},
)
async def scrape_api_metrics(metrics: HttpMetrics = Depends(_metrics_dependency)) -> Response:
    return Response(content=metrics.render(), media_type=CONTENT_TYPE_LATEST)
