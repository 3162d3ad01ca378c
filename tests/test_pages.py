"""Tests for the page shell and placeholder views."""

import pytest
from fastapi.testclient import TestClient

from invoice_tracker.main import create_app
from invoice_tracker.web.pages import PAGES, PlaceholderPage, get_page, navigation

PAGE_CASES = [
    ("/", "Dashboard - Coming Soon"),
    ("/invoices", "Invoices - Coming Soon"),
    ("/settings", "Settings - Coming Soon"),
]


def test_registry_order():
    assert [page.path for page in navigation()] == ["/", "/invoices", "/settings"]
    assert [page.name for page in PAGES] == ["Dashboard", "Invoices", "Settings"]


def test_get_page():
    assert get_page("/invoices").name == "Invoices"
    assert get_page("/invoices/") is None
    assert get_page("/unknown") is None


def test_page_path_must_be_absolute():
    with pytest.raises(ValueError):
        PlaceholderPage(name="Reports", path="reports", endpoint="reports")


@pytest.mark.parametrize("path,message", PAGE_CASES)
def test_page_renders_placeholder(client, path, message):
    response = client.get(path)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert f"<div>{message}</div>" in response.text


@pytest.mark.parametrize("path,message", PAGE_CASES)
def test_page_renders_shell(client, path, message):
    html = client.get(path).text

    assert '<div class="app">' in html
    assert "<h1>Invoice Tracker POC</h1>" in html
    assert "<p>Loki Mode POC - Demonstrating Framework Integration</p>" in html

    positions = [html.index(f'<a href="{p}"') for p in ("/", "/invoices", "/settings")]
    assert positions == sorted(positions)


def test_current_page_is_marked(client):
    html = client.get("/invoices").text

    assert '<a href="/invoices" aria-current="page">Invoices</a>' in html
    assert '<a href="/">Dashboard</a>' in html
    assert '<a href="/settings">Settings</a>' in html


def test_only_one_view_rendered(client):
    html = client.get("/settings").text

    assert "Settings - Coming Soon" in html
    assert "Dashboard - Coming Soon" not in html
    assert "Invoices - Coming Soon" not in html


def test_unknown_path_renders_shell_with_404(client):
    response = client.get("/reports")

    assert response.status_code == 404
    assert response.headers["content-type"].startswith("text/html")
    assert "<h1>Invoice Tracker POC</h1>" in response.text
    assert "Page not found" in response.text
    assert "aria-current" not in response.text


def test_shell_text_is_configurable(monkeypatch):
    monkeypatch.setenv("APP_TITLE", "Invoices & Co")
    monkeypatch.setenv("FOOTER_TEXT", "Staging")

    with TestClient(create_app()) as client:
        html = client.get("/").text

    assert "<h1>Invoices &amp; Co</h1>" in html
    assert "<p>Staging</p>" in html


@pytest.mark.parametrize("path", ["/apiary", "/api-docs", "/apis"])
def test_api_lookalike_path_renders_shell_with_404(client, path):
    response = client.get(path)

    assert response.status_code == 404
    assert response.headers["content-type"].startswith("text/html")
    assert "Page not found" in response.text


def test_bare_api_path_returns_json_404(client):
    response = client.get("/api")

    assert response.status_code == 404
    assert response.headers["content-type"].startswith("application/json")


@pytest.mark.parametrize("path", [path for path, _ in PAGE_CASES])
def test_page_answers_head(client, path):
    response = client.head(path)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")


def test_routes_named_after_registry(client):
    for page in PAGES:
        assert client.app.url_path_for(page.endpoint) == page.path
