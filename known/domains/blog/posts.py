"""Build-time loading of blog posts from a directory of Markdown files.

Every file in the posts directory must start with a YAML front matter block
declaring ``slug``, ``title`` and ``summary``. Loading is all or nothing: a
single bad file raises :class:`ContentError`, since a partial route set would
silently 404 real content.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import frontmatter
import yaml

from known.domains.blog.entities import Post, StaticPaths
from known.domains.blog.render import serialize

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("slug", "title", "summary")


class ContentError(ValueError):
    """A post file or the posts directory cannot be turned into routes"""


def _post_files(posts_dir: Path) -> List[Path]:
    try:
        entries = sorted(posts_dir.iterdir())
    except OSError as exc:
        raise ContentError(f"Cannot read posts directory {posts_dir}: {exc}") from exc

    return [p for p in entries if p.is_file() and not p.name.startswith(".")]


def parse_post(path: Path) -> Post:
    """Read one file and validate its front matter"""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ContentError(f"Cannot read {path}: {exc}") from exc

    try:
        parsed = frontmatter.loads(text)
    except (yaml.YAMLError, ValueError) as exc:
        raise ContentError(f"Invalid front matter in {path}: {exc}") from exc

    metadata = parsed.metadata
    if not isinstance(metadata, dict) or not metadata:
        raise ContentError(f"{path} has no front matter")

    missing = [name for name in REQUIRED_FIELDS if not str(metadata.get(name) or "").strip()]
    if missing:
        raise ContentError(f"{path} is missing front matter field(s): {', '.join(missing)}")

    slug = str(metadata["slug"]).strip()
    if "/" in slug or slug in (".", ".."):
        raise ContentError(f"{path} has slug {slug!r}, which is not a single URL path segment")

    return Post(
        slug=slug,
        title=str(metadata["title"]),
        summary=str(metadata["summary"]),
        body=parsed.content,
        front_matter=dict(metadata),
        path=path,
    )


def load_posts(posts_dir: Union[str, Path]) -> List[Post]:
    posts = [parse_post(path) for path in _post_files(Path(posts_dir))]
    logger.info(f"Loaded {len(posts)} posts from {posts_dir}")
    return posts


def get_static_paths(posts_dir: Union[str, Path]) -> StaticPaths:
    """One route per post file, fallback disabled"""
    posts = load_posts(posts_dir)
    return StaticPaths(paths=[{"params": {"slug": post.slug}} for post in posts], fallback=False)


class BlogSite:
    """Posts loaded and pre-rendered once, looked up by slug afterwards"""

    def __init__(self, posts: List[Post]):
        self._posts: Dict[str, Post] = {}
        self._sources: Dict[str, str] = {}
        for post in posts:
            if post.slug in self._posts:
                logger.warning(f"Duplicate slug {post.slug!r} in {post.path}; later file wins")
            self._posts[post.slug] = post
            self._sources[post.slug] = serialize(post.body)

    @classmethod
    def build(cls, posts_dir: Union[str, Path]) -> "BlogSite":
        return cls(load_posts(posts_dir))

    @property
    def posts(self) -> List[Post]:
        return list(self._posts.values())

    @property
    def static_paths(self) -> StaticPaths:
        return StaticPaths(paths=[{"params": {"slug": slug}} for slug in self._posts], fallback=False)

    def __contains__(self, slug: str) -> bool:
        return slug in self._posts

    def get_static_props(self, slug: str) -> Optional[Dict[str, object]]:
        """Pre-rendered source and front matter, or None outside the route set"""
        post = self._posts.get(slug)
        if post is None:
            return None
        return {"source": self._sources[slug], "front_matter": post.front_matter}
