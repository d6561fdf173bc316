"""Shared pytest fixtures for the tablescaffold test suite.

Provides reusable fixtures for:
- A temporary Next.js-style project tree with route groups and sidebars
- Dialect strategies
- A ``ScaffoldRequest`` factory
"""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Any, Callable

import pytest

from tablescaffold.dialects import dialect_strategy_factory
from tablescaffold.dialects.base import DialectStrategy
from tablescaffold.scaffolder.generator import ScaffoldRequest


ADMIN_SIDEBAR = textwrap.dedent("""\
    import { Table2Icon } from "lucide-react";

    const items = [
      { title: "Dashboard", url: "/admin", icon: Table2Icon },
      // [CODE_MARK admin-sidebar-items]
    ];
    """)

PRIVATE_SIDEBAR = textwrap.dedent("""\
    import { Table2Icon } from "lucide-react";

    const items = [
      // [CODE_MARK private-sidebar-items]
    ];
    """)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Project tree with all three route groups and both sidebars."""
    root = tmp_path / "web"
    for group in ("(admin)", "(private)", "(public)"):
        (root / "app" / group).mkdir(parents=True)
    admin = root / "components" / "admin" / "admin-sidebar.tsx"
    admin.parent.mkdir(parents=True)
    admin.write_text(ADMIN_SIDEBAR, encoding="utf-8")
    private = root / "components" / "private" / "private-sidebar.tsx"
    private.parent.mkdir(parents=True)
    private.write_text(PRIVATE_SIDEBAR, encoding="utf-8")
    yield root


@pytest.fixture
def bare_project_root(tmp_path: Path) -> Path:
    """Empty project directory (no route groups, no sidebars)."""
    root = tmp_path / "bare"
    root.mkdir()
    yield root


# ---------------------------------------------------------------------------
# Dialects & requests
# ---------------------------------------------------------------------------


@pytest.fixture
def sqlite_strategy() -> DialectStrategy:
    return dialect_strategy_factory("sqlite")


@pytest.fixture
def postgresql_strategy() -> DialectStrategy:
    return dialect_strategy_factory("postgresql")


@pytest.fixture
def mysql_strategy() -> DialectStrategy:
    return dialect_strategy_factory("mysql")


@pytest.fixture
def make_request(project_root: Path) -> Callable[..., ScaffoldRequest]:
    """Factory for ``ScaffoldRequest`` objects rooted at ``project_root``.

    Defaults to an admin-level sqlite scaffold of ``post`` with uuidv7 keys;
    any field can be overridden by keyword.
    """

    def _make(**overrides: Any) -> ScaffoldRequest:
        fields: dict[str, Any] = {
            "table": "post",
            "columns": ["title:text", "published:boolean"],
            "authorization_level": "admin",
            "db_dialect_strategy": dialect_strategy_factory("sqlite"),
            "pk_strategy": "uuidv7",
            "project_root": project_root,
        }
        fields.update(overrides)
        return ScaffoldRequest(**fields)

    return _make
