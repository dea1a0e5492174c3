from known.domains.blog.entities import Post, StaticPaths
from known.domains.blog.posts import (
    BlogSite, ContentError, get_static_paths, load_posts, parse_post
)

__all__ = [
    "Post", "StaticPaths",
    "BlogSite", "ContentError", "get_static_paths", "load_posts", "parse_post",
]
