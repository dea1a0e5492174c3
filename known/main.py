from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from known.core.config import settings
from known.core.db import engine, init_models
from known.domains.blog.posts import BlogSite
from known.api.http import (
    health_router,
    auth_router,
    folders_router,
    documents_router,
    pages_router,
    blog_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.create_tables:
        await init_models()

    # ContentError from a bad post aborts startup
    app.state.blog = BlogSite.build(settings.posts_dir)
    logger.info(f"Blog built with {len(app.state.blog.posts)} posts")

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Known",
        description="Documents organized into folders, plus the Known blog",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.api_host],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(folders_router)
    app.include_router(documents_router)
    app.include_router(pages_router)
    app.include_router(blog_router)

    @app.get("/")
    async def root():
        return {
            "message": "Known API",
            "version": "1.0.0",
            "app": "/app",
            "blog": "/blog/",
            "docs": "/docs",
            "health": "/health"
        }

    return app


app = create_app()
