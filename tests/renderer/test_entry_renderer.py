"""
Unit tests for the entry renderer.
Tests page composition, verbatim body injection and template loading.
"""

import re

import pytest

from src.content import ContentRecord, FrontMatter, Post, make_post_id
from src.renderer import EntryPage, EntryRenderer, SeoMeta

BODY_OPEN = '<div class="leading-10 prose lg:prose-lg max-w-full">'


def _post(**overrides) -> Post:
    data = {
        "id": "post-1",
        "title": "Patching time in unit tests",
        "body_html": "<p>Freeze the clock.</p>",
        "slug": "patching-time",
        "description": "How to freeze time",
    }
    data.update(overrides)
    return Post(**data)


def _head(page: str) -> str:
    return page.split("</head>", 1)[0]


def _heading(page: str) -> str:
    return re.search(r"<h1.*?</h1>", page, re.DOTALL).group(0)


class TestEntryRenderer:
    def test_renderer_initialization(self):
        renderer = EntryRenderer()
        assert renderer.templates_dir.exists()
        assert renderer.env is not None

    def test_title_in_heading_and_seo_once_each(self, renderer):
        post = _post()
        page = renderer.render(post)
        assert page.count(post.title) == 2
        assert _heading(page).count(post.title) == 1
        assert _head(page).count(post.title) == 1
        assert f"<title>{post.title} | Test Site</title>" in page

    def test_heading_has_style_accent(self, renderer):
        heading = _heading(renderer.render(_post()))
        assert "bg-gradient-to-r from-red-500 to-pink-500" in heading
        assert '<span class="relative">Patching time in unit tests</span>' in heading

    def test_body_injected_verbatim(self, renderer):
        body = '<script>alert("x")</script>\n<p>a &amp; b <b>bold</b></p>\n<div><div>nested</div></div>'
        page = renderer.render(_post(body_html=body))
        assert f"{BODY_OPEN}{body}</div>" in page

    def test_title_is_escaped(self, renderer):
        page = renderer.render(_post(title="Mocks <vs> stubs"))
        assert "Mocks &lt;vs&gt; stubs" in page
        assert "<vs>" not in page

    def test_rendering_is_idempotent(self, renderer):
        post = _post()
        assert renderer.render(post) == renderer.render(post)

    def test_seo_block(self, renderer):
        head = _head(renderer.render(_post()))
        assert '<meta name="description" content="How to freeze time">' in head
        assert '<link rel="canonical" href="https://example.com/blog/patching-time/">' in head
        assert '<meta property="og:type" content="article">' in head

    def test_seo_falls_back_to_site_description(self, renderer):
        head = _head(renderer.render(_post(description="")))
        assert 'content="A site used in tests"' in head

    def test_no_canonical_without_site_url(self, site):
        site.site_url = ""
        renderer = EntryRenderer(site=site)
        assert "canonical" not in renderer.render(_post())

    def test_layout_wraps_page(self, renderer):
        page = renderer.render(_post())
        assert page.startswith("<!DOCTYPE html>")
        assert '<html lang="en">' in page
        assert '<a class="font-bold" href="/">Test Site</a>' in page
        assert "&copy; Test Author" in page

    def test_render_record(self, renderer):
        record = ContentRecord(
            frontmatter=FrontMatter(title="From a query"),
            html="<p>queried</p>",
        )
        page = renderer.render_record(record)
        assert page.count("From a query") == 2
        assert f"{BODY_OPEN}<p>queried</p></div>" in page
        assert "canonical" not in page

    def test_render_record_from_query_has_canonical(self, renderer, store):
        post_id = make_post_id("fixtures.md")
        page = renderer.render_record(store.query(post_id))
        assert '<link rel="canonical" href="https://example.com/blog/pytest-fixtures/">' in page
        assert page == renderer.render(store.get(post_id))

    def test_render_by_id(self, renderer, store):
        post_id = make_post_id("2021/mocking-open.md")
        page = renderer.render_by_id(store, post_id)
        post = store.get(post_id)
        assert f"{BODY_OPEN}{post.body_html}</div>" in page
        assert page.count(post.title) == 2

    def test_post_url(self, renderer):
        assert renderer.post_url(_post()) == "/blog/patching-time/"


class TestRenderIndex:
    def test_lists_posts_in_order(self, renderer, store):
        page = renderer.render_index(store.posts())
        first = page.index("Pytest fixtures at a glance")
        second = page.index("Mocking open() in Python tests")
        assert first < second
        assert 'href="/blog/pytest-fixtures/"' in page
        assert '<time class="block text-sm text-gray-500" datetime="2021-03-14">' in page

    def test_empty_index(self, renderer):
        page = renderer.render_index([])
        assert "No posts yet." in page
        assert '<meta property="og:type" content="website">' in page


class TestCustomTemplates:
    def test_custom_templates_dir(self, tmp_path, site):
        templates_dir = tmp_path / "templates"
        templates_dir.mkdir()
        (templates_dir / "blog_entry.html.jinja2").write_text(
            "<h1>{{ title }}</h1>{{ body_html|safe }}"
        )

        renderer = EntryRenderer(templates_dir=templates_dir, site=site)
        result = renderer.render(_post(title="A & B", body_html="<p>x</p>"))
        assert result == "<h1>A &amp; B</h1><p>x</p>"


class TestEntryPage:
    def test_to_template_context(self, site):
        page = EntryPage(seo=SeoMeta(title="T", description="D"), body_html="<p/>", site=site)
        context = page.to_template_context()
        assert context["title"] == "T"
        assert context["body_html"] == "<p/>"
        assert context["og_type"] == "article"
        assert context["site"] is site
