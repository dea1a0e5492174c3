from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse

from known.core.templates import templates
from known.domains.blog.posts import BlogSite
from known.domains.blog.render import SITE_TITLE, render_post

router = APIRouter(prefix="/blog", tags=["blog"])


def get_blog(request: Request) -> BlogSite:
    """The site built at startup"""
    return request.app.state.blog


@router.get("/", response_class=HTMLResponse)
async def blog_index(request: Request, blog: BlogSite = Depends(get_blog)):
    return templates.TemplateResponse(
        request,
        "blog/index.html",
        {"title": SITE_TITLE, "posts": blog.posts},
    )


@router.get("/{slug}", response_class=HTMLResponse)
async def blog_post(request: Request, slug: str, blog: BlogSite = Depends(get_blog)):
    """Pre-rendered post; slugs outside the built set are a terminal 404"""
    props = blog.get_static_props(slug)
    
    if props is None:
        return templates.TemplateResponse(
            request,
            "not_found.html",
            {},
            status_code=status.HTTP_404_NOT_FOUND,
        )
    
    return HTMLResponse(render_post(props))
