"""Tests for the Rich console helpers (tablescaffold.utils)."""

from __future__ import annotations

from pathlib import Path

import pytest

from tablescaffold.utils import (
    console,
    print_checklist,
    print_cmd,
    print_error,
    print_success,
    print_summary_table,
    print_written_files,
)


# ---------------------------------------------------------------------------
# Rich output helpers (smoke tests -- just verify no exceptions)
# ---------------------------------------------------------------------------


class TestRichHelpers:
    """Smoke tests for Rich console output helpers."""

    @pytest.mark.unit
    def test_print_success(self):
        # Should not raise
        print_success("scaffold success: post")

    @pytest.mark.unit
    def test_print_error(self):
        print_error("invalid dialect: oracle")

    @pytest.mark.unit
    def test_print_checklist(self):
        print_checklist("scaffold checklist")

    @pytest.mark.unit
    def test_print_summary_table(self):
        print_summary_table({"Table": "post", "Dialect": "sqlite"}, title="Scaffold")

    @pytest.mark.unit
    def test_print_summary_table_empty(self):
        print_summary_table({})


class TestCapturedOutput:
    @pytest.mark.unit
    def test_print_cmd(self):
        with console.capture() as capture:
            print_cmd("npx drizzle-kit generate")
        assert "$ npx drizzle-kit generate" in capture.get()

    @pytest.mark.unit
    def test_print_written_files_relative(self, tmp_path: Path):
        with console.capture() as capture:
            print_written_files([tmp_path / "schema" / "posts.ts"], tmp_path)
        out = capture.get()
        assert "write schema/posts.ts" in out
        assert str(tmp_path) not in out

    @pytest.mark.unit
    def test_print_written_files_outside_root(self, tmp_path: Path):
        outside = Path("/elsewhere/file.ts")
        with console.capture() as capture:
            print_written_files([outside], tmp_path)
        assert "/elsewhere/file.ts" in capture.get()
