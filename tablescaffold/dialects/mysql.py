"""MySQL dialect strategy.

``binary``, ``varbinary`` and ``year`` are reserved names: they are accepted
by the parser but fail loudly at generation time until they are supported.
"""

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

DIALECT = "mysql"

_NUMBER = (CREATE_INPUT_NUMBER, UPDATE_INPUT_NUMBER)
_DATE = (CREATE_INPUT_DATE, UPDATE_INPUT_DATE)


def _column(
    sql_type: str,
    coerce: Callable[[str, str], str],
    args: str = "",
    js_type: str = "string",
    templates: tuple[str, str] = (CREATE_INPUT, UPDATE_INPUT),
    suffix: str = "",
) -> DataTypeStrategy:
    return DataTypeStrategy(
        sql_type=sql_type,
        js_type=js_type,
        form_template=templates[0],
        update_form_template=templates[1],
        schema=lambda o: f'{o.key_name}: {sql_type}("{o.column_name}"{args}){suffix}',
        form_data=lambda o: coerce(o.key_name, o.column_name),
        form_components=("textarea",) if CREATE_TEXTAREA in templates else ("input",),
    )


MYSQL_DATA_TYPE_STRATEGIES: dict[str, DataTypeStrategy] = {
    "int": _column("int", form_data.integer, js_type="number", templates=_NUMBER),
    "tinyint": _column("tinyint", form_data.integer, js_type="number", templates=_NUMBER),
    "smallint": _column("smallint", form_data.integer, js_type="number", templates=_NUMBER),
    "mediumint": _column("mediumint", form_data.integer, js_type="number", templates=_NUMBER),
    "bigint": _column(
        "bigint", form_data.integer, ', { mode: "number" }', js_type="number", templates=_NUMBER
    ),
    "real": _column("real", form_data.float_, js_type="number", templates=_NUMBER),
    "decimal": _column(
        "decimal", form_data.float_, js_type="number", templates=_NUMBER, suffix=".$type<number>()"
    ),
    "double": _column("double", form_data.float_, js_type="number", templates=_NUMBER),
    "float": _column("float", form_data.float_, js_type="number", templates=_NUMBER),
    "serial": _column("serial", form_data.integer, js_type="number", templates=_NUMBER),
    "binary": placeholder("binary", DIALECT),
    "varbinary": placeholder("varbinary", DIALECT),
    "char": _column("char", form_data.string),
    "varchar": _column("varchar", form_data.string, ", { length: 255 }"),
    "text": DataTypeStrategy(
        sql_type="text",
        js_type="string",
        form_template=CREATE_TEXTAREA,
        update_form_template=UPDATE_TEXTAREA,
        schema=lambda o: f'{o.key_name}: text("{o.column_name}")',
        form_data=lambda o: form_data.string(o.key_name, o.column_name),
        form_components=("textarea",),
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
    "date": _column("date", form_data.date, templates=_DATE),
    "datetime": _column("datetime", form_data.date, templates=_DATE),
    "time": _column("time", form_data.string),
    "year": placeholder("year", DIALECT),
    "timestamp": _column("timestamp", form_data.date, templates=_DATE),
    "json": _column(
        "json", form_data.json, js_type="object", templates=(CREATE_TEXTAREA, UPDATE_INPUT_JSON)
    ),
    "references": DataTypeStrategy(
        sql_type="",
        js_type="string",
        form_template=CREATE_REFERENCES_INPUT,
        update_form_template=UPDATE_REFERENCES_INPUT,
        schema=references_schema,
        form_data=lambda o: form_data.references(o.key_name, o.column_name, o.pk_strategy),
    ),
    "file": _column(
        "varchar", form_data.string, ", { length: 255 }", templates=(CREATE_FILE, UPDATE_FILE)
    ),
    "image": _column(
        "varchar", form_data.string, ", { length: 255 }", templates=(CREATE_FILE, UPDATE_FILE)
    ),
}

# Alias: the references form control is already a <select>.
MYSQL_DATA_TYPE_STRATEGIES["references_select"] = MYSQL_DATA_TYPE_STRATEGIES["references"]


MYSQL_DIALECT_STRATEGY = DialectStrategy(
    dialect=DIALECT,
    drizzle_db_core_package="drizzle-orm/mysql-core",
    table_constructor="mysqlTable",
    schema_table_template_path="schema/table.ts.mysql.j2",
    data_type_strategy_map=MYSQL_DATA_TYPE_STRATEGIES,
    pk_data_type="varchar",
    pk_strategy_templates={
        PkStrategy.UUIDV7: (
            'id: varchar("id", { length: 255 }).primaryKey().$defaultFn(() => uuidv7()),'
        ),
        PkStrategy.UUIDV4: (
            'id: varchar("id", { length: 255 }).primaryKey().$defaultFn(() => crypto.randomUUID()),'
        ),
        PkStrategy.CUID2: (
            'id: varchar("id", { length: 255 }).primaryKey().$defaultFn(() => createId()),'
        ),
        PkStrategy.NANOID: (
            'id: varchar("id", { length: 255 }).primaryKey().$defaultFn(() => nanoid()),'
        ),
        PkStrategy.AUTO_INCREMENT: 'id: int("id").primaryKey().autoincrement(),',
    },
    pk_strategy_data_types={
        PkStrategy.UUIDV7: "varchar",
        PkStrategy.UUIDV4: "varchar",
        PkStrategy.CUID2: "varchar",
        PkStrategy.NANOID: "varchar",
        PkStrategy.AUTO_INCREMENT: "int",
    },
    fk_strategy_templates={
        PkStrategy.UUIDV7: 'varchar("{column}", {{ length: 255 }})',
        PkStrategy.UUIDV4: 'varchar("{column}", {{ length: 255 }})',
        PkStrategy.CUID2: 'varchar("{column}", {{ length: 255 }})',
        PkStrategy.NANOID: 'varchar("{column}", {{ length: 255 }})',
        PkStrategy.AUTO_INCREMENT: 'int("{column}")',
    },
    fk_strategy_data_types={
        PkStrategy.UUIDV7: "varchar",
        PkStrategy.UUIDV4: "varchar",
        PkStrategy.CUID2: "varchar",
        PkStrategy.NANOID: "varchar",
        PkStrategy.AUTO_INCREMENT: "int",
    },
    created_at_template='createdAt: timestamp("created_at").notNull().defaultNow(),',
    updated_at_template=(
        'updatedAt: timestamp("updated_at").notNull().defaultNow()'
        ".$onUpdate(() => new Date()),"
    ),
    timestamp_import="timestamp",
    dialect_constraints_map={
        "default-now": ".defaultNow()",
        "autoincrement": ".autoincrement()",
    },
)
