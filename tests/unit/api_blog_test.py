"""Tests for the blog routes."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from known.core.config import settings
from known.domains.blog.posts import ContentError
from known.main import create_app
from tests.conftest import write_post


def test_post_page(client: TestClient) -> None:
    resp = client.get("/blog/a")
    assert resp.status_code == 200
    assert "<title>Known Blog | Post A</title>" in resp.text
    assert '<meta name="description" content="About A">' in resp.text
    assert "<h1>Hello</h1>" in resp.text


def test_unknown_slug_is_not_found(client: TestClient) -> None:
    resp = client.get("/blog/c")
    assert resp.status_code == 404
    assert "This page could not be found" in resp.text


def test_index_lists_posts(client: TestClient) -> None:
    resp = client.get("/blog/")
    assert resp.status_code == 200
    assert 'href="/blog/a"' in resp.text
    assert 'href="/blog/b"' in resp.text


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}


class TestStartup:
    def test_bad_post_aborts_startup(self, posts_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        write_post(posts_dir, "c.md", None)
        monkeypatch.setattr(settings, "posts_dir", str(posts_dir))
        monkeypatch.setattr(settings, "create_tables", False)

        with pytest.raises(ContentError, match="slug"):
            with TestClient(create_app()):
                pass

    def test_startup_builds_blog_from_posts_dir(self, posts_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "posts_dir", str(posts_dir))
        monkeypatch.setattr(settings, "create_tables", False)

        with TestClient(create_app()) as client:
            assert client.get("/blog/b").status_code == 200
