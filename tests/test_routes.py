import pytest
from fastapi.testclient import TestClient

from greeter.main import app

GREETING = "Hello from the backend!"


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def test_get_root_returns_greeting(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.text == GREETING
    assert resp.headers["content-type"].startswith("text/plain")


def test_greeting_ignores_environment(monkeypatch, client):
    monkeypatch.setenv("GREETING", "something else")
    assert client.get("/").text == GREETING


def test_post_root_is_not_allowed(client):
    resp = client.post("/")
    assert resp.status_code == 405
    assert GREETING not in resp.text


@pytest.mark.parametrize("method", ["put", "delete", "patch"])
def test_other_methods_on_root_are_not_allowed(client, method):
    resp = client.request(method.upper(), "/")
    assert resp.status_code == 405


def test_unknown_path_is_not_found(client):
    resp = client.get("/missing")
    assert resp.status_code == 404
    assert GREETING not in resp.text


@pytest.mark.parametrize("path", ["/docs", "/redoc", "/openapi.json"])
def test_docs_routes_are_disabled(client, path):
    assert client.get(path).status_code == 404


def test_no_cors_headers(client):
    resp = client.get("/", headers={"Origin": "http://example.com"})
    assert "access-control-allow-origin" not in resp.headers
