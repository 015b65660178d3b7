"""Tests for API endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from svgscene.config import settings
from svgscene.main import app
from tests.conftest import CIRCLE_SVG, SMILEY_SVG


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["shapes_registered"] == 8
    assert "rect" in data["shape_tags"]


def test_parse_circle():
    response = client.post("/api/parse", json={"svg": CIRCLE_SVG})
    assert response.status_code == 200
    data = response.json()
    assert data["node_count"] == 2
    assert data["scene"]["type"] == "composite"
    assert data["processing_time_ms"] >= 0


def test_parse_smiley():
    response = client.post("/api/parse", json={"svg": SMILEY_SVG})
    assert response.status_code == 200
    assert len(response.json()["scene"]["children"]) == 4


def test_parse_non_svg_root():
    response = client.post("/api/parse", json={"svg": "<not-svg/>"})
    assert response.status_code == 200
    data = response.json()
    assert data["scene"] is None
    assert data["node_count"] == 0


def test_parse_malformed_xml():
    response = client.post("/api/parse", json={"svg": "<svg><g></svg>"})
    assert response.status_code == 422
    assert "Malformed SVG" in response.json()["detail"]


def test_parse_too_large(monkeypatch):
    monkeypatch.setattr(settings, "max_svg_bytes", 10)
    response = client.post("/api/parse", json={"svg": CIRCLE_SVG})
    assert response.status_code == 413


def test_parse_missing_body():
    response = client.post("/api/parse", json={})
    assert response.status_code == 422


def test_path_endpoint():
    response = client.post("/api/path", json={"d": "M0 0 C0 10 10 10 10 0"})
    assert response.status_code == 200
    data = response.json()
    assert data["path"]["d"] == "M0,0 C0,10 10,10 10,0"
    assert data["bounds"][3] == pytest.approx(7.5)
