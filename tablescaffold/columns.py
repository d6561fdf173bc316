"""Column descriptor mini-language.

A column is written ``name:type[:constraint,constraint...]``, for example
``title:text``, ``id:text:pk,default-uuidv7`` or
``user_id:bigint:fk-users.id``.  Parsing is positional and dialect-agnostic;
the data type and constraint tokens are only checked against a
``DialectStrategy`` when a consumer resolves them, so schema emission and
form emission each validate the pieces they use.
"""

from __future__ import annotations

import re
from typing import Iterable

from pydantic import BaseModel, ConfigDict

from .casing import camel_case, snake_case
from .dialects.base import (
    COMMON_CONSTRAINTS_MAP,
    CONSTRAINT_IMPORTS,
    DataTypeStrategy,
    DialectStrategy,
)
from .errors import DuplicateColumnNameError, InvalidColumnSpecError, UnknownConstraintError


_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")

# ``fk-<table>.<column>`` -> ``.references(() => <table>.<column>)``
FK_CONSTRAINT_RE = re.compile(r"^fk-([A-Za-z_]\w*)\.([A-Za-z_]\w*)$")

UPLOAD_DATA_TYPES = frozenset({"file", "image"})
REFERENCES_DATA_TYPES = frozenset({"references", "references_select"})

# Persisted names of the columns every generated table already has.
RESERVED_COLUMN_NAMES = frozenset({"id", "created_at", "updated_at"})


# ---------------------------------------------------------------------------
# Descriptor
# ---------------------------------------------------------------------------


class ColumnDescriptor(BaseModel):
    """One parsed column spec."""

    model_config = ConfigDict(frozen=True)

    name: str
    data_type: str
    constraints: tuple[str, ...] = ()

    @classmethod
    def parse(cls, raw: str) -> "ColumnDescriptor":
        """Split *raw* into name, data type and constraint tokens.

        Raises:
            InvalidColumnSpecError: The name or type segment is missing, the
                name is not a usable identifier, or there are more than three
                ``:``-separated segments.
        """
        parts = raw.strip().split(":")
        if len(parts) < 2 or not parts[1]:
            raise InvalidColumnSpecError(raw, "expected name:type[:constraints]")
        if len(parts) > 3:
            raise InvalidColumnSpecError(raw, "too many ':' separated segments")

        name, data_type = parts[0], parts[1]
        if not _NAME_RE.match(name):
            raise InvalidColumnSpecError(raw, f"{name!r} is not a valid column name")

        constraints: tuple[str, ...] = ()
        if len(parts) == 3:
            constraints = tuple(token.strip() for token in parts[2].split(",") if token.strip())

        return cls(name=name, data_type=data_type, constraints=constraints)

    @property
    def is_reference(self) -> bool:
        return self.data_type in REFERENCES_DATA_TYPES

    @property
    def is_upload(self) -> bool:
        """File and image columns are filled by upload plumbing, not form data."""
        return self.data_type in UPLOAD_DATA_TYPES

    @property
    def is_generated(self) -> bool:
        """True when the database fills the value (primary keys, ``default-*``)."""
        return any(
            token == "pk"
            or token.startswith("pk-")
            or token.startswith("default-")
            or token == "autoincrement"
            for token in self.constraints
        )

    @property
    def reference_base(self) -> str:
        """``author`` for both ``author:references`` and ``author_id:references``."""
        base = snake_case(self.name)
        if base.endswith("_id"):
            base = base[: -len("_id")]
        return base

    @property
    def column_name(self) -> str:
        """The persisted SQL column name."""
        if self.is_reference:
            return f"{self.reference_base}_id"
        return snake_case(self.name)

    @property
    def key_name(self) -> str:
        """The property name used in generated TypeScript."""
        return camel_case(self.column_name)


def parse_columns(raw_columns: Iterable[str]) -> list[ColumnDescriptor]:
    """Parse every spec in *raw_columns*, keeping caller order.

    Two specs that persist to the same SQL column name are rejected with
    ``DuplicateColumnNameError``, as is a spec that persists to one of the
    generated ``id``, ``created_at`` or ``updated_at`` columns.
    """
    descriptors: list[ColumnDescriptor] = []
    seen: set[str] = set(RESERVED_COLUMN_NAMES)
    for raw in raw_columns:
        descriptor = ColumnDescriptor.parse(raw)
        if descriptor.column_name in seen:
            raise DuplicateColumnNameError(descriptor.column_name)
        seen.add(descriptor.column_name)
        descriptors.append(descriptor)
    return descriptors


# ---------------------------------------------------------------------------
# Resolution against a dialect
# ---------------------------------------------------------------------------


def resolve_data_type(descriptor: ColumnDescriptor, dialect: DialectStrategy) -> DataTypeStrategy:
    """Return the dialect's strategy for the column's type.

    Raises ``UnknownDataTypeError`` naming the type and dialect.
    """
    return dialect.get_data_type_strategy(descriptor.data_type)


def resolve_constraint(token: str, dialect: DialectStrategy, column: str = "") -> str:
    """Translate one constraint token into its schema code suffix."""
    if token in COMMON_CONSTRAINTS_MAP:
        return COMMON_CONSTRAINTS_MAP[token]
    if token in dialect.dialect_constraints_map:
        return dialect.dialect_constraints_map[token]
    match = FK_CONSTRAINT_RE.match(token)
    if match:
        table, target = match.groups()
        return f".references(() => {table}.{target})"
    raise UnknownConstraintError(token, column)


def resolve_constraints(descriptor: ColumnDescriptor, dialect: DialectStrategy) -> str:
    """Concatenate the suffixes for every constraint on *descriptor*.

    Tokens are applied in the order given; a repeated token is applied once.
    """
    return "".join(
        resolve_constraint(token, dialect, descriptor.name)
        for token in dict.fromkeys(descriptor.constraints)
    )


def constraint_imports(descriptor: ColumnDescriptor) -> list[str]:
    """Import statements the column's constraints depend on."""
    return [
        CONSTRAINT_IMPORTS[token]
        for token in descriptor.constraints
        if token in CONSTRAINT_IMPORTS
    ]
