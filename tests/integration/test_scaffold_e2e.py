"""Integration tests for scaffolding several tables into one project.

These tests run the real processor against a temporary project tree and
check the shared files every run touches: the schema index and the
sidebars.  No database, Node toolchain or network access is required.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from tablescaffold.cli import main
from tablescaffold.dialects import dialect_strategy_factory
from tablescaffold.scaffolder import ScaffoldProcessor, ScaffoldRequest


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _scaffold(root: Path, table: str, columns: list[str], level: str = "admin") -> list[Path]:
    request = ScaffoldRequest(
        table=table,
        columns=columns,
        authorization_level=level,
        db_dialect_strategy=dialect_strategy_factory("postgresql"),
        pk_strategy="cuid2",
        project_root=root,
    )
    return ScaffoldProcessor(request).process()


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


@pytest.mark.integration
class TestMultiTableProject:
    """Scaffold a small blog (authors, posts, comments) into one project."""

    @pytest.fixture(autouse=True)
    def blog(self, project_root: Path) -> Path:
        _scaffold(project_root, "author", ["name:varchar:not-null", "bio:text"])
        _scaffold(project_root, "post", ["title:varchar", "author:references", "cover:image"])
        _scaffold(
            project_root, "comment", ["post:references", "body:text"], level="private"
        )
        return project_root

    def test_schema_index_lists_every_table(self, project_root: Path):
        index = (project_root / "lib" / "schema.ts").read_text()
        for name in ("authors", "posts", "comments"):
            assert f'import * as {name} from "@/schema/{name}";' in index
            assert index.count(f"  ...{name},\n") == 1
        body = index[index.index("export const schema"):]
        assert body.index("...authors") < body.index("...posts") < body.index("...comments")

    def test_sidebars(self, project_root: Path):
        admin = (project_root / "components" / "admin" / "admin-sidebar.tsx").read_text()
        private = (project_root / "components" / "private" / "private-sidebar.tsx").read_text()
        assert 'url: "/admin/authors"' in admin
        assert 'url: "/admin/posts"' in admin
        assert "comments" not in admin
        assert 'url: "/comments"' in private

    def test_reference_schema(self, project_root: Path):
        posts = (project_root / "schema" / "posts.ts").read_text()
        assert 'authorId: text("author_id").references(() => authors.id),' in posts
        assert 'import { authors } from "./authors";' in posts
        assert 'import { createId } from "@paralleldrive/cuid2";' in posts
        assert 'cover: text("cover"),' in posts

    def test_upload_action(self, project_root: Path):
        action = (project_root / "actions" / "posts" / "update-post.ts").read_text()
        assert "uploadFile(coverFile)" in action
        assert 'authorId: formData.get("author_id") as string,' in action

    def test_private_pages_location(self, project_root: Path):
        comments = project_root / "app" / "(private)" / "comments"
        assert (comments / "[id]" / "edit" / "page.tsx").is_file()

    def test_rerun_changes_no_shared_file(self, project_root: Path):
        index = (project_root / "lib" / "schema.ts").read_text()
        admin = (project_root / "components" / "admin" / "admin-sidebar.tsx").read_text()
        _scaffold(project_root, "post", ["title:varchar", "author:references", "cover:image"])
        assert (project_root / "lib" / "schema.ts").read_text() == index
        assert (project_root / "components" / "admin" / "admin-sidebar.tsx").read_text() == admin


@pytest.mark.integration
class TestCliEndToEnd:
    def test_init_then_scaffold(self, project_root: Path):
        main(["init", "--root", str(project_root), "--dialect", "sqlite",
              "--pk-strategy", "auto_increment"])
        main(["scaffold", "tag", "-c", "name:text:unique", "-a", "admin",
              "--root", str(project_root)])

        schema = (project_root / "schema" / "tags.ts").read_text()
        pk = 'id: integer("id", { mode: "number" }).primaryKey({ autoIncrement: true }),'
        assert pk in schema
        assert 'name: text("name").unique(),' in schema
        delete_action = (project_root / "actions" / "tags" / "delete-tag.ts").read_text()
        assert 'parseInt(formData.get("id") as string)' in delete_action
        index = (project_root / "lib" / "schema.ts").read_text()
        assert 'import * as tags from "@/schema/tags";' in index
