"""Tests for rendering a pre-rendered blog post page."""

from __future__ import annotations

from known.domains.blog.render import hydrate, page_title, render_post, serialize

PROPS = {
    "source": serialize("Hello **world** & friends"),
    "front_matter": {"slug": "a", "title": "Post A", "summary": "About <A>"},
}


def test_serialize_renders_markdown() -> None:
    assert serialize("**bold**") == "<p><strong>bold</strong></p>"


def test_serialize_empty_body() -> None:
    assert serialize("") == ""


def test_hydrate_is_not_escaped() -> None:
    assert str(hydrate("<p>x</p>")) == "<p>x</p>"


def test_page_title() -> None:
    assert page_title({"title": "Post A"}) == "Known Blog | Post A"


def test_render_post_has_title_description_and_body() -> None:
    html = render_post(PROPS)
    assert "<title>Known Blog | Post A</title>" in html
    assert '<meta name="description" content="About &lt;A&gt;">' in html
    assert "<p>Hello <strong>world</strong> &amp; friends</p>" in html
    assert ">Post A</h1>" in html


def test_render_post_in_fallback_shows_loading_indicator() -> None:
    html = render_post({}, is_fallback=True)
    assert 'class="spinner"' in html
    assert "Post A" not in html
