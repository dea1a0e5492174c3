"""Shared fixtures: a throwaway SQLite database, a built blog and an app client."""

import asyncio
import os
from collections.abc import AsyncIterator
from pathlib import Path
from typing import Any

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("CREATE_TABLES", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from known.core.db import get_db, init_models
from known.domains.blog.posts import BlogSite
from known.main import create_app

PASSWORD = "Secret123"


def write_post(directory: Path, filename: str, slug: str | None, title: str = "Title", summary: str = "Summary", body: str = "Body text.") -> Path:
    lines = ["---"]
    if slug is not None:
        lines.append(f"slug: {slug}")
    lines += [f"title: {title}", f"summary: {summary}", "---", "", body, ""]
    path = directory / filename
    path.write_text("\n".join(lines), encoding="utf-8")
    return path


@pytest.fixture
def posts_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "posts"
    directory.mkdir()
    write_post(directory, "a.md", "a", title="Post A", summary="About A", body="# Hello\n\nSome *text*.")
    write_post(directory, "b.md", "b", title="Post B", summary="About B")
    return directory


@pytest.fixture
def blog(posts_dir: Path) -> BlogSite:
    return BlogSite.build(posts_dir)


@pytest.fixture
def engine(tmp_path: Path) -> AsyncEngine:
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'known.db'}", poolclass=NullPool)
    asyncio.run(init_models(engine))
    return engine


@pytest.fixture
def client(engine: AsyncEngine, blog: BlogSite) -> TestClient:
    app = create_app()
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def _override() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _override
    app.state.blog = blog
    return TestClient(app)


def register(client: TestClient, email: str = "ada@example.com", name: str = "Ada") -> dict[str, Any]:
    resp = client.post("/auth/register", json={"email": email, "name": name, "password": PASSWORD})
    assert resp.status_code == 201, resp.text
    result: dict[str, Any] = resp.json()
    return result


def login(client: TestClient, email: str = "ada@example.com") -> str:
    resp = client.post("/auth/login", json={"email": email, "password": PASSWORD})
    assert resp.status_code == 200, resp.text
    token: str = resp.json()["access_token"]
    return token


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
