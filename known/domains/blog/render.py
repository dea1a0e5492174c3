from typing import Any, Dict, Mapping

from markdown_it import MarkdownIt
from markupsafe import Markup

from known.core.templates import templates

SITE_TITLE = "Known Blog"

_md = MarkdownIt("commonmark", {"html": True})


def serialize(body: str) -> str:
    """Pre-render a Markdown body to HTML at build time"""
    return _md.render(body or "").strip()


def hydrate(source: str) -> Markup:
    return Markup(source)


def page_title(front_matter: Mapping[str, Any]) -> str:
    return f"{SITE_TITLE} | {front_matter.get('title', '')}"


def post_context(props: Mapping[str, Any], is_fallback: bool = False) -> Dict[str, Any]:
    if is_fallback:
        return {"is_fallback": True, "title": SITE_TITLE}

    front_matter = props["front_matter"]
    return {
        "is_fallback": False,
        "title": page_title(front_matter),
        "description": front_matter.get("summary", ""),
        "heading": front_matter.get("title", ""),
        "content": hydrate(props["source"]),
    }


def render_post(props: Mapping[str, Any], is_fallback: bool = False) -> str:
    """Full HTML page for one post, or a loading indicator while in fallback"""
    template = templates.get_template("blog/post.html")
    return template.render(post_context(props, is_fallback))
