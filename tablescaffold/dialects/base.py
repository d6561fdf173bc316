"""Data type and dialect strategy records.

A ``DialectStrategy`` bundles everything that differs between SQL dialects:
the per-type ``DataTypeStrategy`` table, primary-key and timestamp column
fragments, dialect-only constraint tokens and the schema table template.
Instances are module-level constants built once per dialect and never
mutated; the scaffold engine only ever looks things up in them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from ..errors import DataTypeNotImplementedError, UnknownDataTypeError
from ..pk_strategy import PkStrategy


# ---------------------------------------------------------------------------
# Form control templates (paths relative to the scaffolder template root)
# ---------------------------------------------------------------------------

CREATE_INPUT = "components/table/create-input.tsx.j2"
CREATE_INPUT_NUMBER = "components/table/create-input-number.tsx.j2"
CREATE_INPUT_DATE = "components/table/create-input-date.tsx.j2"
CREATE_TEXTAREA = "components/table/create-textarea.tsx.j2"
CREATE_CHECKBOX = "components/table/create-checkbox.tsx.j2"
CREATE_FILE = "components/table/create-file.tsx.j2"
CREATE_REFERENCES_INPUT = "components/table/create-references-input.tsx.j2"

UPDATE_INPUT = "components/table/update-input.tsx.j2"
UPDATE_INPUT_NUMBER = "components/table/update-input-number.tsx.j2"
UPDATE_INPUT_DATE = "components/table/update-input-date.tsx.j2"
UPDATE_INPUT_JSON = "components/table/update-input-json.tsx.j2"
UPDATE_TEXTAREA = "components/table/update-textarea.tsx.j2"
UPDATE_CHECKBOX = "components/table/update-checkbox.tsx.j2"
UPDATE_FILE = "components/table/update-file.tsx.j2"
UPDATE_REFERENCES_INPUT = "components/table/update-references-input.tsx.j2"
UPDATE_INPUT_HIDDEN = "components/table/update-input-hidden.tsx.j2"


# ---------------------------------------------------------------------------
# Constraint tokens shared by every dialect
# ---------------------------------------------------------------------------

COMMON_CONSTRAINTS_MAP: dict[str, str] = {
    "pk": ".primaryKey()",
    "unique": ".unique()",
    "not-null": ".notNull()",
    "default-uuidv7": ".$defaultFn(() => uuidv7())",
    "default-uuidv4": ".$defaultFn(() => crypto.randomUUID())",
    "default-cuid2": ".$defaultFn(() => createId())",
    "default-nanoid": ".$defaultFn(() => nanoid())",
}

# Imports a schema file needs when a column carries the constraint.
CONSTRAINT_IMPORTS: dict[str, str] = {
    "default-uuidv7": 'import { uuidv7 } from "uuidv7";',
    "default-cuid2": 'import { createId } from "@paralleldrive/cuid2";',
    "default-nanoid": 'import { nanoid } from "nanoid";',
}


# ---------------------------------------------------------------------------
# Strategy records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ColumnFragmentOpts:
    """Inputs to a data type's fragment generators."""

    key_name: str
    column_name: str
    references_table: Optional[str] = None
    fk_template: Optional[str] = None
    pk_strategy: PkStrategy = PkStrategy.UUIDV7


FragmentFn = Callable[[ColumnFragmentOpts], str]


@dataclass(frozen=True)
class DataTypeStrategy:
    """How one column type behaves in a dialect.

    ``form_template`` and ``update_form_template`` are ``None`` for types with
    no form control (binary columns).  ``schema`` and ``form_data`` build the
    schema-definition fragment and the form-data extraction line.
    """

    sql_type: str
    js_type: str
    form_template: Optional[str]
    update_form_template: Optional[str]
    schema: FragmentFn
    form_data: FragmentFn
    form_components: tuple[str, ...] = ("input",)

    @property
    def is_form_renderable(self) -> bool:
        return self.form_template is not None and self.update_form_template is not None

    def get_key_value_str_for_schema(self, opts: ColumnFragmentOpts) -> str:
        return self.schema(opts)

    def get_key_val_str_for_form_data(self, opts: ColumnFragmentOpts) -> str:
        return self.form_data(opts)


@dataclass(frozen=True)
class DialectStrategy:
    """Everything the scaffold engine needs to know about one SQL dialect."""

    dialect: str
    drizzle_db_core_package: str
    table_constructor: str
    schema_table_template_path: str
    data_type_strategy_map: dict[str, DataTypeStrategy]
    pk_data_type: str
    pk_strategy_templates: dict[PkStrategy, str]
    pk_strategy_data_types: dict[PkStrategy, str]
    fk_strategy_templates: dict[PkStrategy, str]
    fk_strategy_data_types: dict[PkStrategy, str]
    created_at_template: str
    updated_at_template: str
    timestamp_import: str
    dialect_constraints_map: dict[str, str] = field(default_factory=dict)
    extra_imports: tuple[str, ...] = ()

    def get_data_type_strategy(self, data_type: str) -> DataTypeStrategy:
        """Look up *data_type* or raise ``UnknownDataTypeError``."""
        try:
            return self.data_type_strategy_map[data_type]
        except KeyError:
            raise UnknownDataTypeError(data_type, self.dialect) from None


# ---------------------------------------------------------------------------
# Helpers for building strategy tables
# ---------------------------------------------------------------------------


def not_implemented(data_type: str, dialect: str, operation: str) -> FragmentFn:
    """Fragment generator for a reserved type; fails instead of emitting blank code."""

    def _raise(opts: ColumnFragmentOpts) -> str:
        raise DataTypeNotImplementedError(data_type, dialect, operation)

    return _raise


def placeholder(data_type: str, dialect: str) -> DataTypeStrategy:
    """A type name reserved for future support in *dialect*."""
    return DataTypeStrategy(
        sql_type="",
        js_type="string",
        form_template=None,
        update_form_template=None,
        schema=not_implemented(data_type, dialect, "schema generation"),
        form_data=not_implemented(data_type, dialect, "form data extraction"),
        form_components=(),
    )


def references_schema(opts: ColumnFragmentOpts) -> str:
    """Foreign-key column pointing at ``<references_table>.id``."""
    return f"{opts.key_name}: {opts.fk_template}.references(() => {opts.references_table}.id)"
