"""Tests for TemplateRenderer (tablescaffold.scaffolder.templates).

Covers:
- Rendering from the bundled template directory and from a custom one
- Case filters
- Missing templates
- No HTML escaping of generated TSX
- render_to_file overwrite semantics and render_to_file_if_not_exists
- Bundled templates
"""

from __future__ import annotations

from pathlib import Path

import pytest

from tablescaffold.errors import TemplateMissingError
from tablescaffold.scaffolder.templates import TemplateRenderer


pytestmark = pytest.mark.unit


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    root = tmp_path / "templates"
    (root / "nested").mkdir(parents=True)
    (root / "greeting.txt.j2").write_text("Hello {{ name | pascal_case }}\n")
    (root / "cases.txt.j2").write_text("{{ v | snake_case }}/{{ v | capital_case }}")
    (root / "control.tsx.j2").write_text("{{ v }}")
    (root / "nested" / "item.txt.j2").write_text(
        "{% for item in items %}\n{{ item | kebab_case }}\n{% endfor %}\n"
    )
    return root


@pytest.fixture
def renderer(template_dir: Path) -> TemplateRenderer:
    return TemplateRenderer(template_dir)


class TestRender:
    def test_render(self, renderer):
        assert renderer.render("greeting.txt.j2", {"name": "blog_post"}) == "Hello BlogPost\n"

    def test_trim_blocks(self, renderer):
        out = renderer.render("nested/item.txt.j2", {"items": ["BlogPost", "tag_name"]})
        assert out == "blog-post\ntag-name\n"

    def test_missing_template(self, renderer):
        with pytest.raises(TemplateMissingError) as exc_info:
            renderer.render("nope.j2", {})
        assert exc_info.value.template_path == "nope.j2"

    def test_case_filters(self, renderer):
        out = renderer.render("cases.txt.j2", {"v": "blogPost"})
        assert out == "blog_post/Blog Post"

    def test_no_html_escaping(self, renderer):
        assert renderer.render("control.tsx.j2", {"v": "<Input />"}) == "<Input />"

    def test_filters_are_per_instance(self, renderer):
        for name in ("snake_case", "kebab_case", "pascal_case", "camel_case", "capital_case"):
            assert name in renderer.env.filters


class TestRenderToFile:
    def test_creates_parents(self, renderer, tmp_path: Path):
        out = tmp_path / "out" / "a" / "greeting.txt"
        assert renderer.render_to_file("greeting.txt.j2", out, {"name": "x"}) == out
        assert out.read_text() == "Hello X\n"

    def test_overwrites(self, renderer, tmp_path: Path):
        out = tmp_path / "greeting.txt"
        out.write_text("stale")
        renderer.render_to_file("greeting.txt.j2", out, {"name": "fresh"})
        assert out.read_text() == "Hello Fresh\n"

    def test_if_not_exists(self, renderer, tmp_path: Path):
        out = tmp_path / "greeting.txt"
        assert renderer.render_to_file_if_not_exists("greeting.txt.j2", out, {"name": "a"}) == out
        assert renderer.render_to_file_if_not_exists("greeting.txt.j2", out, {"name": "b"}) is None
        assert out.read_text() == "Hello A\n"


class TestBundledTemplates:
    @pytest.mark.parametrize(
        "template",
        [
            "lib/schema.ts.j2",
            "app/table/[id]/edit/page.tsx.j2",
            "components/table/update-input-hidden.tsx.j2",
        ],
    )
    def test_present(self, template):
        assert (TemplateRenderer().template_dir / template).is_file()
