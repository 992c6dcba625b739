from __future__ import annotations

import os

import pytest


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "UP"}


@pytest.mark.parametrize("path", ["/metrics", "/api/metrics"])
def test_scrape_endpoints_serve_text_exposition(client, path):
    resp = client.get(path)

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain")
    assert "http_request_duration_seconds" in resp.text


def test_requests_are_labelled_with_route_template(client):
    client.get("/get_daycare/1")
    client.get("/get_daycare/2")
    client.get("/get_daycare/9999")

    text = client.get("/metrics").text

    assert 'route="/get_daycare/{daycare_id}"' in text
    assert 'route="/get_daycare/1"' not in text
    assert 'code="404"' in text


def test_observation_count_per_route(metrics, client):
    for _ in range(3):
        client.get("/get_parents")

    count = metrics.registry.get_sample_value(
        "http_request_duration_seconds_count",
        {"method": "GET", "route": "/get_parents", "code": "200"},
    )
    assert count == 3


def test_unmatched_path_uses_raw_path(metrics, client):
    client.get("/no_such_route")

    count = metrics.registry.get_sample_value(
        "http_request_duration_seconds_count",
        {"method": "GET", "route": "/no_such_route", "code": "404"},
    )
    assert count == 1


def test_scrape_requests_are_not_observed(client):
    client.get("/metrics")
    client.get("/api/metrics")
    client.get("/health")

    text = client.get("/metrics").text

    assert 'route="/metrics"' not in text
    assert 'route="/api/metrics"' not in text
    assert 'route="/health"' in text


def test_histogram_buckets(client):
    client.get("/health")

    text = client.get("/metrics").text

    for bound in ("0.005", "0.01", "0.025", "0.05", "0.1", "0.25", "0.5", "1.0", "2.0", "5.0", "+Inf"):
        assert f'le="{bound}"' in text


def test_fresh_registry_per_app(metrics, client):
    client.get("/health")

    assert metrics.registry.get_sample_value(
        "http_request_duration_seconds_count",
        {"method": "GET", "route": "/health", "code": "200"},
    ) == 1


def test_docs_ui_is_served(client):
    resp = client.get("/api")

    assert resp.status_code == 200
    assert "swagger" in resp.text.lower()


def test_openapi_document_lists_entity_routes(client):
    spec = client.get("/api/openapi.json").json()

    paths = spec["paths"]
    for entity, plural in [
        ("daycare", "daycares"),
        ("classroom", "classrooms"),
        ("parent", "parents"),
        ("child", "children"),
        ("enrollment", "enrollments"),
    ]:
        assert f"/get_{plural}" in paths
        assert any(p.startswith(f"/get_{entity}/") for p in paths)
        assert any(p.startswith(f"/update_{entity}/") for p in paths)
        assert any(p.startswith(f"/delete_{entity}/") for p in paths)
    assert {tag["name"] for tag in spec["tags"]} >= {"Daycare", "Classroom", "Enrollment", "Child", "Parent"}
    assert spec["servers"] == [{"url": "http://localhost:3000"}]


def test_lifespan_opens_and_closes_database(app, database):
    from fastapi.testclient import TestClient

    with TestClient(app):
        assert database.connected
    assert not database.connected


def test_default_metrics_carry_prefix(client):
    text = client.get("/metrics").text

    assert "test_python_gc_collections_total" in text
    assert "test_python_info" in text
    if os.path.exists("/proc/self/stat"):
        assert "test_process_cpu_seconds_total" in text
    unprefixed = [
        line for line in text.splitlines()
        if line.startswith(("python_", "process_", "# TYPE python_", "# TYPE process_"))
    ]
    assert unprefixed == []
