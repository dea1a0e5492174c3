from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Post:
    """One Markdown file: front matter plus body"""
    slug: str
    title: str
    summary: str
    body: str
    front_matter: Dict[str, Any] = field(default_factory=dict)
    path: Optional[Path] = None


@dataclass(frozen=True)
class StaticPaths:
    """Closed set of pre-rendered routes"""
    paths: List[Dict[str, Dict[str, str]]]
    fallback: bool = False

    @property
    def slugs(self) -> List[str]:
        return [p["params"]["slug"] for p in self.paths]
