"""SQLite dialect strategy.

SQLite has no native boolean, timestamp or json column; those are modelled
as ``integer``/``text`` columns with a drizzle ``mode`` so the generated code
still sees booleans, dates and objects.
"""

from __future__ import annotations

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
    DataTypeStrategy,
    DialectStrategy,
    not_implemented,
    references_schema,
)

DIALECT = "sqlite"


SQLITE_DATA_TYPE_STRATEGIES: dict[str, DataTypeStrategy] = {
    "integer": DataTypeStrategy(
        sql_type="integer",
        js_type="number",
        form_template=CREATE_INPUT_NUMBER,
        update_form_template=UPDATE_INPUT_NUMBER,
        schema=lambda o: f'{o.key_name}: integer("{o.column_name}")',
        form_data=lambda o: form_data.integer(o.key_name, o.column_name),
    ),
    "real": DataTypeStrategy(
        sql_type="real",
        js_type="number",
        form_template=CREATE_INPUT_NUMBER,
        update_form_template=UPDATE_INPUT_NUMBER,
        schema=lambda o: f'{o.key_name}: real("{o.column_name}")',
        form_data=lambda o: form_data.float_(o.key_name, o.column_name),
    ),
    "numeric": DataTypeStrategy(
        sql_type="numeric",
        js_type="string",
        form_template=CREATE_INPUT,
        update_form_template=UPDATE_INPUT,
        schema=lambda o: f'{o.key_name}: numeric("{o.column_name}")',
        form_data=lambda o: form_data.string(o.key_name, o.column_name),
    ),
    "text": DataTypeStrategy(
        sql_type="text",
        js_type="string",
        form_template=CREATE_INPUT,
        update_form_template=UPDATE_INPUT,
        schema=lambda o: f'{o.key_name}: text("{o.column_name}")',
        form_data=lambda o: form_data.string(o.key_name, o.column_name),
    ),
    "boolean": DataTypeStrategy(
        sql_type="integer",
        js_type="boolean",
        form_template=CREATE_CHECKBOX,
        update_form_template=UPDATE_CHECKBOX,
        schema=lambda o: f'{o.key_name}: integer("{o.column_name}", {{ mode: "boolean" }})',
        form_data=lambda o: form_data.boolean(o.key_name, o.column_name),
        form_components=("checkbox",),
    ),
    "bigint": DataTypeStrategy(
        sql_type="blob",
        js_type="number",
        form_template=CREATE_INPUT_NUMBER,
        update_form_template=UPDATE_INPUT_NUMBER,
        schema=lambda o: f'{o.key_name}: blob("{o.column_name}", {{ mode: "bigint" }})',
        form_data=lambda o: form_data.bigint(o.key_name, o.column_name),
    ),
    "timestamp": DataTypeStrategy(
        sql_type="integer",
        js_type="string",
        form_template=CREATE_INPUT_DATE,
        update_form_template=UPDATE_INPUT_DATE,
        schema=lambda o: f'{o.key_name}: integer("{o.column_name}", {{ mode: "timestamp" }})',
        form_data=lambda o: form_data.date(o.key_name, o.column_name),
    ),
    "json": DataTypeStrategy(
        sql_type="text",
        js_type="object",
        form_template=CREATE_TEXTAREA,
        update_form_template=UPDATE_INPUT_JSON,
        schema=lambda o: f'{o.key_name}: text("{o.column_name}", {{ mode: "json" }})',
        form_data=lambda o: form_data.json(o.key_name, o.column_name),
        form_components=("textarea",),
    ),
    "blob": DataTypeStrategy(
        sql_type="blob",
        js_type="object",
        form_template=None,
        update_form_template=None,
        schema=lambda o: f'{o.key_name}: blob("{o.column_name}")',
        form_data=not_implemented("blob", DIALECT, "form data extraction"),
        form_components=(),
    ),
    "references": DataTypeStrategy(
        sql_type="",
        js_type="string",
        form_template=CREATE_REFERENCES_INPUT,
        update_form_template=UPDATE_REFERENCES_INPUT,
        schema=references_schema,
        form_data=lambda o: form_data.references(o.key_name, o.column_name, o.pk_strategy),
    ),
    "file": DataTypeStrategy(
        sql_type="text",
        js_type="string",
        form_template=CREATE_FILE,
        update_form_template=UPDATE_FILE,
        schema=lambda o: f'{o.key_name}: text("{o.column_name}")',
        form_data=lambda o: form_data.string(o.key_name, o.column_name),
    ),
    "image": DataTypeStrategy(
        sql_type="text",
        js_type="string",
        form_template=CREATE_FILE,
        update_form_template=UPDATE_FILE,
        schema=lambda o: f'{o.key_name}: text("{o.column_name}")',
        form_data=lambda o: form_data.string(o.key_name, o.column_name),
    ),
}

# Alias: the references form control is already a <select>.
SQLITE_DATA_TYPE_STRATEGIES["references_select"] = SQLITE_DATA_TYPE_STRATEGIES["references"]


SQLITE_DIALECT_STRATEGY = DialectStrategy(
    dialect=DIALECT,
    drizzle_db_core_package="drizzle-orm/sqlite-core",
    table_constructor="sqliteTable",
    schema_table_template_path="schema/table.ts.sqlite.j2",
    data_type_strategy_map=SQLITE_DATA_TYPE_STRATEGIES,
    pk_data_type="text",
    pk_strategy_templates={
        PkStrategy.UUIDV7: 'id: text("id").primaryKey().$defaultFn(() => uuidv7()),',
        PkStrategy.UUIDV4: 'id: text("id").primaryKey().$defaultFn(() => crypto.randomUUID()),',
        PkStrategy.CUID2: 'id: text("id").primaryKey().$defaultFn(() => createId()),',
        PkStrategy.NANOID: 'id: text("id").primaryKey().$defaultFn(() => nanoid()),',
        PkStrategy.AUTO_INCREMENT: (
            'id: integer("id", { mode: "number" }).primaryKey({ autoIncrement: true }),'
        ),
    },
    pk_strategy_data_types={
        PkStrategy.UUIDV7: "text",
        PkStrategy.UUIDV4: "text",
        PkStrategy.CUID2: "text",
        PkStrategy.NANOID: "text",
        PkStrategy.AUTO_INCREMENT: "integer",
    },
    fk_strategy_templates={
        PkStrategy.UUIDV7: 'text("{column}")',
        PkStrategy.UUIDV4: 'text("{column}")',
        PkStrategy.CUID2: 'text("{column}")',
        PkStrategy.NANOID: 'text("{column}")',
        PkStrategy.AUTO_INCREMENT: 'integer("{column}")',
    },
    fk_strategy_data_types={
        PkStrategy.UUIDV7: "text",
        PkStrategy.UUIDV4: "text",
        PkStrategy.CUID2: "text",
        PkStrategy.NANOID: "text",
        PkStrategy.AUTO_INCREMENT: "integer",
    },
    created_at_template=(
        'createdAt: integer("created_at", { mode: "timestamp" })'
        ".notNull().default(sql`(unixepoch())`),"
    ),
    updated_at_template=(
        'updatedAt: integer("updated_at", { mode: "timestamp" })'
        ".notNull().default(sql`(unixepoch())`).$onUpdate(() => new Date()),"
    ),
    timestamp_import="integer",
    dialect_constraints_map={
        "default-now": ".default(sql`(unixepoch())`)",
        "pk-autoincrement": ".primaryKey({ autoIncrement: true })",
    },
    extra_imports=('import { sql } from "drizzle-orm";',),
)
