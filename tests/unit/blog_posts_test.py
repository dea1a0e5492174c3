"""Tests for building the blog route set from Markdown files."""

from __future__ import annotations

from pathlib import Path

import pytest

from known.domains.blog.posts import BlogSite, ContentError, get_static_paths, load_posts, parse_post
from tests.conftest import write_post


class TestGetStaticPaths:
    def test_one_route_per_file(self, posts_dir: Path) -> None:
        paths = get_static_paths(posts_dir)
        assert paths.paths == [{"params": {"slug": "a"}}, {"params": {"slug": "b"}}]
        assert set(paths.slugs) == {"a", "b"}
        assert paths.fallback is False

    def test_missing_slug_fails_the_whole_build(self, posts_dir: Path) -> None:
        write_post(posts_dir, "c.md", None)
        with pytest.raises(ContentError, match="slug"):
            get_static_paths(posts_dir)

    def test_file_without_front_matter_fails(self, posts_dir: Path) -> None:
        (posts_dir / "plain.md").write_text("# Just a heading\n", encoding="utf-8")
        with pytest.raises(ContentError, match="no front matter"):
            get_static_paths(posts_dir)

    def test_malformed_yaml_fails(self, posts_dir: Path) -> None:
        (posts_dir / "broken.md").write_text("---\nslug: [unclosed\n---\nbody\n", encoding="utf-8")
        with pytest.raises(ContentError):
            get_static_paths(posts_dir)

    def test_missing_directory_fails(self, tmp_path: Path) -> None:
        with pytest.raises(ContentError, match="Cannot read posts directory"):
            get_static_paths(tmp_path / "does-not-exist")

    def test_hidden_files_are_skipped(self, posts_dir: Path) -> None:
        (posts_dir / ".DS_Store").write_bytes(b"\x00\x01")
        assert get_static_paths(posts_dir).slugs == ["a", "b"]

    def test_empty_directory_gives_empty_route_set(self, tmp_path: Path) -> None:
        assert get_static_paths(tmp_path).paths == []


class TestParsePost:
    def test_reads_front_matter_and_body(self, posts_dir: Path) -> None:
        post = parse_post(posts_dir / "a.md")
        assert post.slug == "a"
        assert post.title == "Post A"
        assert post.summary == "About A"
        assert "Some *text*." in post.body
        assert post.front_matter["title"] == "Post A"

    @pytest.mark.parametrize("slug", ["2024/launch", "a/", ".", ".."])
    def test_slug_must_be_one_path_segment(self, tmp_path: Path, slug: str) -> None:
        path = write_post(tmp_path, "x.md", f"'{slug}'")
        with pytest.raises(ContentError, match="single URL path segment"):
            parse_post(path)

    def test_nested_slug_fails_the_whole_build(self, posts_dir: Path) -> None:
        write_post(posts_dir, "c.md", "2024/launch")
        with pytest.raises(ContentError, match="2024/launch"):
            BlogSite.build(posts_dir)

    def test_blank_summary_is_missing(self, tmp_path: Path) -> None:
        path = write_post(tmp_path, "x.md", "x", summary="''")
        with pytest.raises(ContentError, match="summary"):
            parse_post(path)


class TestBlogSite:
    def test_static_props_for_known_slug(self, posts_dir: Path) -> None:
        site = BlogSite.build(posts_dir)
        props = site.get_static_props("a")
        assert props is not None
        assert "<h1>Hello</h1>" in props["source"]
        assert "<em>text</em>" in props["source"]
        assert props["front_matter"]["summary"] == "About A"

    def test_unknown_slug_is_outside_route_set(self, posts_dir: Path) -> None:
        site = BlogSite.build(posts_dir)
        assert "zzz" not in site
        assert site.get_static_props("zzz") is None

    def test_duplicate_slug_later_file_wins(self, posts_dir: Path) -> None:
        write_post(posts_dir, "c.md", "a", title="Newer A")
        site = BlogSite.build(posts_dir)
        assert site.static_paths.slugs == ["a", "b"]
        assert site.get_static_props("a")["front_matter"]["title"] == "Newer A"  # type: ignore[index]

    def test_load_posts_is_sorted_by_filename(self, posts_dir: Path) -> None:
        write_post(posts_dir, "0-first.md", "first")
        assert [p.slug for p in load_posts(posts_dir)] == ["first", "a", "b"]
