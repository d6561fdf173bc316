"""Idempotent text mutations for shared project files.

Scaffolding one table at a time into a shared project means later runs must
register their code next to earlier runs' code without duplicating it.  Each
helper here checks whether its text is already present before writing and
returns ``True`` only when the file actually changed.

Anchors are matched literally, including any leading indentation the caller
passes.  A missing anchor is a hard error: it means the file no longer has
the shape the generator expects.
"""

from __future__ import annotations

from pathlib import Path

from ..errors import AnchorNotFoundError, TargetFileNotFoundError


def append_to_file_if_not_exists(
    path: str | Path,
    text: str,
    marker: str | None = None,
) -> bool:
    """Append *text* unless *marker* (default: *text*) is already in the file.

    The file and its parent directories are created when missing.
    """
    target = Path(path)
    search = text if marker is None else marker
    content = _read_text(target) if target.exists() else ""
    if search in content:
        return False
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("a", encoding="utf-8") as fh:
        fh.write(text)
    return True


def prepend_to_file_if_not_exists(path: str | Path, text: str) -> bool:
    """Insert *text* at the start of the file unless it is already present."""
    target = _existing(path)
    content = _read_text(target)
    if text in content:
        return False
    _write_text(target, text + content)
    return True


def insert_text_before_if_not_exists(path: str | Path, anchor: str, text: str) -> bool:
    """Splice *text* immediately before the first occurrence of *anchor*."""
    target = _existing(path)
    content = _read_text(target)
    index = content.find(anchor)
    if index == -1:
        raise AnchorNotFoundError(target, anchor)
    if text in content:
        return False
    _write_text(target, content[:index] + text + content[index:])
    return True


def insert_text_after_if_not_exists(path: str | Path, anchor: str, text: str) -> bool:
    """Splice *text* immediately after the first occurrence of *anchor*."""
    target = _existing(path)
    content = _read_text(target)
    index = content.find(anchor)
    if index == -1:
        raise AnchorNotFoundError(target, anchor)
    if text in content:
        return False
    end = index + len(anchor)
    _write_text(target, content[:end] + text + content[end:])
    return True


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _existing(path: str | Path) -> Path:
    target = Path(path)
    if not target.is_file():
        raise TargetFileNotFoundError(target)
    return target


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _write_text(path: Path, content: str) -> None:
    """Create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
