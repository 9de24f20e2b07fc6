#!/usr/bin/env python3
"""Tests for the JSON analysis API."""

import pytest

from conftest import create_heads_up_hand, create_three_handed_hand
from webapp import RuntimeConfig, create_app


def _runtime(**overrides) -> RuntimeConfig:
    values = dict(
        env="development",
        host="127.0.0.1",
        port=8788,
        debug=False,
        max_content_length=64 * 1024,
        allowed_hosts=set(),
    )
    values.update(overrides)
    return RuntimeConfig(**values)


@pytest.fixture
def client():
    app = create_app(_runtime())
    app.config["TESTING"] = True
    return app.test_client()


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"ok": True}


def test_analyze_single_hand(client):
    resp = client.post("/api/analyze", json=create_three_handed_hand())
    assert resp.status_code == 200

    report = resp.get_json()
    assert report["info"]["players"] == 3
    assert [p["pos"] for p in report["players"]] == ["sb", "bb", "bu"]
    assert report["players"][1]["chipsAfter"] == 245


def test_analyze_batch(client):
    resp = client.post("/api/analyze", json={"hands": [create_heads_up_hand(), create_three_handed_hand()]})
    assert resp.status_code == 200
    reports = resp.get_json()["reports"]
    assert [r["info"]["players"] for r in reports] == [2, 3]


def test_invalid_json_is_rejected(client):
    resp = client.post("/api/analyze", data="{not json", content_type="application/json")
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_non_object_body_is_rejected(client):
    resp = client.post("/api/analyze", json=42)
    assert resp.status_code == 400


def test_unknown_player_is_rejected(client):
    hand = create_heads_up_hand()
    hand["showdown"].append({"player": "mallory", "type": "collect", "amount": 1})
    resp = client.post("/api/analyze", json=hand)
    assert resp.status_code == 400
    assert "mallory" in resp.get_json()["error"]


def test_body_size_limit():
    app = create_app(_runtime(max_content_length=256))
    resp = app.test_client().post("/api/analyze", json=create_three_handed_hand())
    assert resp.status_code == 413


def test_unknown_api_route(client):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Not found"}


def test_allowed_hosts():
    app = create_app(_runtime(allowed_hosts={"hands.example.com"}))
    client = app.test_client()

    assert client.get("/api/health").status_code == 400
    ok = client.get("/api/health", headers={"Host": "hands.example.com"})
    assert ok.status_code == 200


def test_runtime_config_from_env(monkeypatch):
    monkeypatch.setenv("ANALYZER_ENV", "production")
    monkeypatch.setenv("ANALYZER_PORT", "9000")
    monkeypatch.setenv("ANALYZER_MAX_CONTENT_LENGTH", "not-a-number")
    monkeypatch.setenv("ANALYZER_ALLOWED_HOSTS", "A.example.com, b.example.com")

    from webapp import load_runtime_config
    runtime = load_runtime_config()

    assert runtime.port == 9000
    assert runtime.debug is False
    assert runtime.max_content_length == 1024 * 1024
    assert runtime.allowed_hosts == {"a.example.com", "b.example.com"}


def test_string_amount_is_rejected_as_bad_request(client):
    hand = create_heads_up_hand()
    hand["seats"][0]["chips"] = "100"
    resp = client.post("/api/analyze", json=hand)
    assert resp.status_code == 400
    assert "must be a number" in resp.get_json()["error"]
