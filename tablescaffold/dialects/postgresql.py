"""PostgreSQL dialect strategy."""

from __future__ import annotations

from typing import Callable

from ..pk_strategy import PkStrategy
from . import form_data
from .base import (
    CREATE_CHECKBOX,
    CREATE_FILE,
    CREATE_INPUT,
    CREATE_INPUT_DATE,
    CREATE_INPUT_NUMBER,
    CREATE_REFERENCES_INPUT,
    CREATE_TEXTAREA,
    UPDATE_CHECKBOX,
    UPDATE_FILE,
    UPDATE_INPUT,
    UPDATE_INPUT_DATE,
    UPDATE_INPUT_JSON,
    UPDATE_INPUT_NUMBER,
    UPDATE_REFERENCES_INPUT,
    UPDATE_TEXTAREA,
    DataTypeStrategy,
    DialectStrategy,
    placeholder,
    references_schema,
)

DIALECT = "postgresql"


def _column(
    sql_type: str,
    coerce: Callable[[str, str], str],
    args: str = "",
    js_type: str = "string",
    templates: tuple[str, str] = (CREATE_INPUT, UPDATE_INPUT),
) -> DataTypeStrategy:
    """Strategy for a column rendered as ``key: sql_type("column"<args>)``."""
    return DataTypeStrategy(
        sql_type=sql_type,
        js_type=js_type,
        form_template=templates[0],
        update_form_template=templates[1],
        schema=lambda o: f'{o.key_name}: {sql_type}("{o.column_name}"{args})',
        form_data=lambda o: coerce(o.key_name, o.column_name),
        form_components=("textarea",) if CREATE_TEXTAREA in templates else ("input",),
    )


_NUMBER = (CREATE_INPUT_NUMBER, UPDATE_INPUT_NUMBER)
_DATE = (CREATE_INPUT_DATE, UPDATE_INPUT_DATE)
_JSON = (CREATE_TEXTAREA, UPDATE_INPUT_JSON)

POSTGRESQL_DATA_TYPE_STRATEGIES: dict[str, DataTypeStrategy] = {
    "smallint": _column("smallint", form_data.integer, js_type="number", templates=_NUMBER),
    "integer": _column("integer", form_data.integer, js_type="number", templates=_NUMBER),
    "bigint": _column(
        "bigint", form_data.integer, ', { mode: "number" }', js_type="number", templates=_NUMBER
    ),
    "serial": _column("serial", form_data.integer, js_type="number", templates=_NUMBER),
    "bigserial": _column(
        "bigserial", form_data.integer, ', { mode: "number" }', js_type="number", templates=_NUMBER
    ),
    "boolean": DataTypeStrategy(
        sql_type="boolean",
        js_type="boolean",
        form_template=CREATE_CHECKBOX,
        update_form_template=UPDATE_CHECKBOX,
        schema=lambda o: f'{o.key_name}: boolean("{o.column_name}")',
        form_data=lambda o: form_data.boolean(o.key_name, o.column_name),
        form_components=("checkbox",),
    ),
    "text": DataTypeStrategy(
        sql_type="text",
        js_type="string",
        form_template=CREATE_TEXTAREA,
        update_form_template=UPDATE_TEXTAREA,
        schema=lambda o: f'{o.key_name}: text("{o.column_name}")',
        form_data=lambda o: form_data.string(o.key_name, o.column_name),
        form_components=("textarea",),
    ),
    "varchar": _column("varchar", form_data.string, ", { length: 255 }"),
    "char": _column("char", form_data.string, ", { length: 255 }"),
    "uuid": _column("uuid", form_data.string),
    "numeric": _column("numeric", form_data.string),
    "decimal": _column("decimal", form_data.string),
    "real": _column("real", form_data.float_, js_type="number", templates=_NUMBER),
    "double_precision": _column(
        "doublePrecision", form_data.float_, js_type="number", templates=_NUMBER
    ),
    "json": _column("json", form_data.json, js_type="object", templates=_JSON),
    "jsonb": _column("jsonb", form_data.json, js_type="object", templates=_JSON),
    "date": _column("date", form_data.date, ', { mode: "date" }', templates=_DATE),
    "time": _column("time", form_data.string),
    "timestamp": _column("timestamp", form_data.date, templates=_DATE),
    "interval": placeholder("interval", DIALECT),
    "bytea": placeholder("bytea", DIALECT),
    "references": DataTypeStrategy(
        sql_type="",
        js_type="string",
        form_template=CREATE_REFERENCES_INPUT,
        update_form_template=UPDATE_REFERENCES_INPUT,
        schema=references_schema,
        form_data=lambda o: form_data.references(o.key_name, o.column_name, o.pk_strategy),
    ),
    "file": _column("text", form_data.string, templates=(CREATE_FILE, UPDATE_FILE)),
    "image": _column("text", form_data.string, templates=(CREATE_FILE, UPDATE_FILE)),
}


POSTGRESQL_DIALECT_STRATEGY = DialectStrategy(
    dialect=DIALECT,
    drizzle_db_core_package="drizzle-orm/pg-core",
    table_constructor="pgTable",
    schema_table_template_path="schema/table.ts.postgresql.j2",
    data_type_strategy_map=POSTGRESQL_DATA_TYPE_STRATEGIES,
    pk_data_type="text",
    pk_strategy_templates={
        PkStrategy.UUIDV7: 'id: text("id").primaryKey().$defaultFn(() => uuidv7()),',
        PkStrategy.UUIDV4: 'id: uuid("id").primaryKey().defaultRandom(),',
        PkStrategy.CUID2: 'id: text("id").primaryKey().$defaultFn(() => createId()),',
        PkStrategy.NANOID: 'id: text("id").primaryKey().$defaultFn(() => nanoid()),',
        PkStrategy.AUTO_INCREMENT: 'id: serial("id").primaryKey(),',
    },
    pk_strategy_data_types={
        PkStrategy.UUIDV7: "text",
        PkStrategy.UUIDV4: "uuid",
        PkStrategy.CUID2: "text",
        PkStrategy.NANOID: "text",
        PkStrategy.AUTO_INCREMENT: "serial",
    },
    fk_strategy_templates={
        PkStrategy.UUIDV7: 'text("{column}")',
        PkStrategy.UUIDV4: 'uuid("{column}")',
        PkStrategy.CUID2: 'text("{column}")',
        PkStrategy.NANOID: 'text("{column}")',
        PkStrategy.AUTO_INCREMENT: 'integer("{column}")',
    },
    fk_strategy_data_types={
        PkStrategy.UUIDV7: "text",
        PkStrategy.UUIDV4: "uuid",
        PkStrategy.CUID2: "text",
        PkStrategy.NANOID: "text",
        PkStrategy.AUTO_INCREMENT: "integer",
    },
    created_at_template='createdAt: timestamp("created_at").notNull().defaultNow(),',
    updated_at_template=(
        'updatedAt: timestamp("updated_at").notNull().defaultNow()'
        ".$onUpdate(() => new Date()),"
    ),
    timestamp_import="timestamp",
    dialect_constraints_map={
        "default-now": ".defaultNow()",
        "default-random": ".defaultRandom()",
    },
)
