"""Table scaffold orchestrator.

Takes a ``ScaffoldRequest`` (table name, raw column specs, dialect strategy,
authorization level, primary-key strategy) and emits the full CRUD bundle for
that table into an existing project tree:

- ``schema/<tables>.ts`` drizzle table definition
- list/detail/new/edit/delete pages under ``app/<route-group><tables>/``
- create/update/delete server actions under ``actions/<tables>/``
- column definitions and create/update/delete forms under ``components/<tables>/``

It then registers the schema module in ``lib/schema.ts`` and, for admin and
private scaffolds, links the list page from the sidebar.  Every column is
parsed and resolved against the dialect before the first file is written,
so a bad data type or constraint token aborts the run with nothing on disk.
Later failures (a column with no form control, a missing anchor) leave the
files of earlier stages in place; re-running is safe because shared files
are only touched through the idempotent helpers in ``file_ops``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, InstanceOf, field_validator

from ..casing import Cases, case_factory
from ..columns import (
    ColumnDescriptor,
    constraint_imports,
    parse_columns,
    resolve_constraints,
    resolve_data_type,
)
from ..dialects.base import (
    UPDATE_INPUT_HIDDEN,
    ColumnFragmentOpts,
    DataTypeStrategy,
    DialectStrategy,
)
from ..errors import FormNotRenderableError, UnknownAuthorizationLevelError
from ..pk_strategy import (
    PK_JS_TYPES,
    PK_STRATEGY_IMPORT_TEMPLATES,
    PkStrategy,
    resolve_pk_strategy,
)
from ..utils import print_checklist, print_cmd, print_success
from .file_ops import insert_text_before_if_not_exists, prepend_to_file_if_not_exists
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Route groups and shared-file anchors
# ---------------------------------------------------------------------------

ROUTE_GROUPS: dict[str, str] = {
    "admin": "(admin)/admin/",
    "private": "(private)/",
    "public": "(public)/",
}

URL_PREFIXES: dict[str, str] = {
    "admin": "/admin/",
    "private": "/",
    "public": "/",
}

SCHEMA_INDEX_PATH = "lib/schema.ts"
SCHEMA_INDEX_ANCHOR = "  // [CODE_MARK schema-index]"

SIDEBARS: dict[str, tuple[str, str]] = {
    "admin": ("components/admin/admin-sidebar.tsx", "  // [CODE_MARK admin-sidebar-items]"),
    "private": ("components/private/private-sidebar.tsx", "  // [CODE_MARK private-sidebar-items]"),
}

FORM_COMPONENT_IMPORTS: dict[str, str] = {
    "input": 'import { Input } from "@/components/ui/input";',
    "textarea": 'import { Textarea } from "@/components/ui/textarea";',
    "checkbox": 'import { Checkbox } from "@/components/ui/checkbox";',
}

# How the actions coerce the ``id`` form field for each pk strategy.
PK_FORM_DATA: dict[PkStrategy, str] = {
    PkStrategy.CUID2: 'formData.get("id") as string',
    PkStrategy.UUIDV7: 'formData.get("id") as string',
    PkStrategy.UUIDV4: 'formData.get("id") as string',
    PkStrategy.NANOID: 'formData.get("id") as string',
    PkStrategy.AUTO_INCREMENT: 'parseInt(formData.get("id") as string)',
}

COMPLETION_COMMANDS = ("npx drizzle-kit generate", "npx drizzle-kit migrate")

RELATIONS_IMPORT = 'import { relations } from "drizzle-orm";'


def authorization_route_group(level: str) -> str:
    """Map an authorization level to its ``app/`` route-group prefix."""
    try:
        return ROUTE_GROUPS[level]
    except KeyError:
        raise UnknownAuthorizationLevelError(level) from None


# ---------------------------------------------------------------------------
# Request and state
# ---------------------------------------------------------------------------


class ScaffoldRequest(BaseModel):
    """Everything one scaffold run needs, fully resolved by the caller."""

    model_config = ConfigDict(frozen=True)

    table: str = Field(..., min_length=1)
    columns: list[str] = Field(default_factory=list)
    authorization_level: str = Field(..., description="admin, private or public")
    db_dialect_strategy: InstanceOf[DialectStrategy]
    pk_strategy: PkStrategy = Field(default=PkStrategy.UUIDV7)
    project_root: Path = Field(default=Path("."))
    pluralize: bool = True
    enable_schema_generation: bool = True
    enable_completion_message: bool = False

    @field_validator("pk_strategy", mode="before")
    @classmethod
    def _check_pk_strategy(cls, value: str | PkStrategy) -> PkStrategy:
        return resolve_pk_strategy(value)


class ScaffoldStage(str, Enum):
    """Linear progress of one run; there is no rollback between stages."""
    PARSED = "parsed"
    SCHEMA_EMITTED = "schema_emitted"
    VIEWS_EMITTED = "views_emitted"
    ACTIONS_EMITTED = "actions_emitted"
    FORMS_EMITTED = "forms_emitted"
    INDEX_REGISTERED = "index_registered"
    DONE = "done"


@dataclass(frozen=True)
class ResolvedColumn:
    """A parsed column together with its dialect strategy and name variants."""

    descriptor: ColumnDescriptor
    strategy: DataTypeStrategy
    constraints_code: str
    cases: Cases
    references: Cases | None = None

    @property
    def column_name(self) -> str:
        return self.descriptor.column_name

    @property
    def key_name(self) -> str:
        return self.descriptor.key_name

    @property
    def data_type(self) -> str:
        return self.descriptor.data_type

    @property
    def label(self) -> str:
        if self.references is not None:
            return self.references.singular_capital_case
        return self.cases.original_capital_case

    @property
    def is_generated(self) -> bool:
        return self.descriptor.is_generated

    @property
    def is_upload(self) -> bool:
        return self.descriptor.is_upload

    @property
    def is_reference(self) -> bool:
        return self.references is not None


# ---------------------------------------------------------------------------
# Main processor
# ---------------------------------------------------------------------------


class ScaffoldProcessor:
    """Scaffold orchestrator for one table.

    Construction parses and validates the whole request; :meth:`process`
    then walks the stages in order and returns every path it wrote.
    """

    def __init__(
        self,
        request: ScaffoldRequest,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.request = request
        self.renderer = renderer or TemplateRenderer()
        self.dialect = request.db_dialect_strategy
        self.root = Path(request.project_root)
        self.table = case_factory(request.table, request.pluralize)
        self.route_group = authorization_route_group(request.authorization_level)
        self.columns = self._parse_columns()
        self.written: list[Path] = []
        self.stage = ScaffoldStage.PARSED

    # -- Public API --------------------------------------------------------

    def process(self) -> list[Path]:
        """Run every stage and return the files written or modified."""
        # 1. Schema
        if self.request.enable_schema_generation:
            self.add_schema()
        self.stage = ScaffoldStage.SCHEMA_EMITTED

        # 2. Views
        self.add_list_view()
        self.add_detail_view()
        self.add_new_view()
        self.add_edit_view()
        self.add_delete_view()
        self.stage = ScaffoldStage.VIEWS_EMITTED

        # 3. Server actions
        self.add_create_action()
        self.add_update_action()
        self.add_delete_action()
        self.stage = ScaffoldStage.ACTIONS_EMITTED

        # 4. Column definitions and forms
        self.add_columns_definition()
        self.add_create_form()
        self.add_update_form()
        self.add_delete_form()
        self.stage = ScaffoldStage.FORMS_EMITTED

        # 5. Shared registrations
        self.register_schema_index()
        self.add_sidebar_link()
        self.stage = ScaffoldStage.INDEX_REGISTERED

        if self.request.enable_completion_message:
            self.print_completion_message()
        self.stage = ScaffoldStage.DONE
        return list(self.written)

    # -- Parsing -----------------------------------------------------------

    def _parse_columns(self) -> list[ResolvedColumn]:
        resolved: list[ResolvedColumn] = []
        for descriptor in parse_columns(self.request.columns):
            strategy = resolve_data_type(descriptor, self.dialect)
            constraints_code = resolve_constraints(descriptor, self.dialect)
            references = None
            if descriptor.is_reference:
                references = case_factory(descriptor.reference_base, self.request.pluralize)
            resolved.append(
                ResolvedColumn(
                    descriptor=descriptor,
                    strategy=strategy,
                    constraints_code=constraints_code,
                    cases=case_factory(descriptor.name),
                    references=references,
                )
            )
        return resolved

    # -- Context building --------------------------------------------------

    def _base_context(self) -> dict[str, Any]:
        """Variables every template receives.

        ``table``
            ``Cases`` of the table name (``table.plural_kebab_case`` etc.).
        ``columns``
            ``ResolvedColumn`` list in caller order.
        ``reference_columns``
            The subset of ``columns`` typed ``references``; each has a
            ``references`` ``Cases`` for the target table.
        ``upload_columns``
            The subset typed ``file`` or ``image``.
        ``authorization_level``, ``is_admin``, ``is_private``, ``is_public``
            The requested level and one flag per level.
        ``route_group``, ``url_prefix``
            ``"(admin)/admin/"`` / ``"/admin/"`` and so on.
        ``pk_strategy``, ``pk_js_type``
            The primary-key strategy id and the TypeScript type of ``id``.
        """
        level = self.request.authorization_level
        return {
            "table": self.table,
            "columns": self.columns,
            "reference_columns": [c for c in self.columns if c.is_reference],
            "upload_columns": [c for c in self.columns if c.is_upload],
            "authorization_level": level,
            "is_admin": level == "admin",
            "is_private": level == "private",
            "is_public": level == "public",
            "route_group": self.route_group,
            "url_prefix": URL_PREFIXES[level],
            "pk_strategy": self.request.pk_strategy.value,
            "pk_js_type": PK_JS_TYPES[self.request.pk_strategy],
            "dialect": self.dialect.dialect,
        }

    def _render(
        self,
        template_path: str,
        relative_output: str,
        extra: dict[str, Any] | None = None,
    ) -> Path:
        context = {**self._base_context(), **(extra or {})}
        path = self.renderer.render_to_file(template_path, self.root / relative_output, context)
        self.written.append(path)
        return path

    @property
    def _app_dir(self) -> str:
        return f"app/{self.route_group}{self.table.plural_kebab_case}"

    @property
    def _actions_dir(self) -> str:
        return f"actions/{self.table.plural_kebab_case}"

    @property
    def _components_dir(self) -> str:
        return f"components/{self.table.plural_kebab_case}"

    # -- Schema ------------------------------------------------------------

    def add_schema(self) -> Path:
        """Render ``schema/<tables>.ts`` from the dialect's table template."""
        lines = ["    " + self.dialect.pk_strategy_templates[self.request.pk_strategy]]
        lines.extend(self.get_key_value_str_for_schema(column) for column in self.columns)
        lines.append("    " + self.dialect.created_at_template)
        lines.append("    " + self.dialect.updated_at_template)

        return self._render(
            self.dialect.schema_table_template_path,
            f"schema/{self.table.plural_kebab_case}.ts",
            {
                "columns_code": "\n".join(lines),
                "imports": self.generate_imports_code(),
            },
        )

    def get_key_value_str_for_schema(self, column: ResolvedColumn) -> str:
        fk_template = None
        if column.is_reference:
            fk_template = self.dialect.fk_strategy_templates[self.request.pk_strategy].format(
                column=column.column_name
            )
        opts = ColumnFragmentOpts(
            key_name=column.key_name,
            column_name=column.column_name,
            references_table=column.references.plural_camel_case if column.references else None,
            fk_template=fk_template,
        )
        code = column.strategy.get_key_value_str_for_schema(opts)
        return f"    {code}{column.constraints_code},"

    def generate_imports_code(self) -> str:
        """Build the import block of the schema file.

        The drizzle import lists each column type the file actually uses,
        once, in first-use order: the pk type, then column types, then the
        timestamp type.
        """
        pk = self.request.pk_strategy
        data_types: dict[str, None] = {self.dialect.pk_strategy_data_types[pk]: None}
        module_imports: dict[str, None] = {}
        reference_imports: dict[str, None] = {}

        for column in self.columns:
            if column.references is not None:
                data_types[self.dialect.fk_strategy_data_types[pk]] = None
                if column.references.plural_kebab_case != self.table.plural_kebab_case:
                    ref = column.references
                    reference_imports[
                        f'import {{ {ref.plural_camel_case} }} from "./{ref.plural_kebab_case}";'
                    ] = None
            else:
                data_types[column.strategy.sql_type or column.data_type] = None
            for line in constraint_imports(column.descriptor):
                module_imports[line] = None
        data_types[self.dialect.timestamp_import] = None

        code = "import {\n"
        code += f"  {self.dialect.table_constructor},\n"
        for data_type in data_types:
            code += f"  {data_type},\n"
        code += f'}} from "{self.dialect.drizzle_db_core_package}";\n'

        pk_import = PK_STRATEGY_IMPORT_TEMPLATES[pk]
        has_references = any(c.is_reference for c in self.columns)
        relations_import = RELATIONS_IMPORT if has_references else ""
        for line in (*self.dialect.extra_imports, relations_import, pk_import, *module_imports):
            if line and line not in code:
                code += line + "\n"

        if reference_imports:
            code += "\n" + "\n".join(reference_imports) + "\n"
        return code

    # -- Views -------------------------------------------------------------

    def add_list_view(self) -> Path:
        return self._render("app/table/page.tsx.j2", f"{self._app_dir}/page.tsx")

    def add_detail_view(self) -> Path:
        return self._render("app/table/[id]/page.tsx.j2", f"{self._app_dir}/[id]/page.tsx")

    def add_new_view(self) -> Path:
        return self._render("app/table/new/page.tsx.j2", f"{self._app_dir}/new/page.tsx")

    def add_edit_view(self) -> Path:
        return self._render(
            "app/table/[id]/edit/page.tsx.j2", f"{self._app_dir}/[id]/edit/page.tsx"
        )

    def add_delete_view(self) -> Path:
        return self._render(
            "app/table/[id]/delete/page.tsx.j2", f"{self._app_dir}/[id]/delete/page.tsx"
        )

    # -- Actions -----------------------------------------------------------

    def add_create_action(self) -> Path:
        """Create action: generated and upload columns are not read from form data."""
        columns = [c for c in self.columns if not c.is_generated and not c.is_upload]
        return self._render(
            "actions/table/create-action.ts.j2",
            f"{self._actions_dir}/create-{self.table.singular_kebab_case}.ts",
            {
                "form_data_key_vals": self.get_form_data_key_vals(columns),
            },
        )

    def add_update_action(self) -> Path:
        columns = [c for c in self.columns if not c.is_upload]
        return self._render(
            "actions/table/update-action.ts.j2",
            f"{self._actions_dir}/update-{self.table.singular_kebab_case}.ts",
            {
                "id_form_data": PK_FORM_DATA[self.request.pk_strategy],
                "form_data_key_vals": self.get_form_data_key_vals(columns),
            },
        )

    def add_delete_action(self) -> Path:
        return self._render(
            "actions/table/delete-action.ts.j2",
            f"{self._actions_dir}/delete-{self.table.singular_kebab_case}.ts",
            {"id_form_data": PK_FORM_DATA[self.request.pk_strategy]},
        )

    def get_form_data_key_vals(self, columns: list[ResolvedColumn]) -> str:
        code = ""
        for column in columns:
            if not column.strategy.is_form_renderable:
                raise FormNotRenderableError(column.descriptor.name, column.data_type)
            opts = ColumnFragmentOpts(
                key_name=column.key_name,
                column_name=column.column_name,
                pk_strategy=self.request.pk_strategy,
            )
            code += column.strategy.get_key_val_str_for_form_data(opts)
        return code

    # -- Components --------------------------------------------------------

    def add_columns_definition(self) -> Path:
        return self._render(
            "components/table/columns.tsx.j2",
            f"{self._components_dir}/{self.table.singular_kebab_case}-columns.tsx",
        )

    def add_create_form(self) -> Path:
        columns = [c for c in self.columns if not c.is_generated]
        return self._render(
            "components/table/create-form.tsx.j2",
            f"{self._components_dir}/{self.table.singular_kebab_case}-create-form.tsx",
            {
                "form_controls_imports": self.get_form_controls_imports(columns),
                "form_controls": self.get_form_controls_html(columns),
            },
        )

    def add_update_form(self) -> Path:
        return self._render(
            "components/table/update-form.tsx.j2",
            f"{self._components_dir}/{self.table.singular_kebab_case}-update-form.tsx",
            {
                "form_controls_imports": self.get_form_controls_imports(
                    [c for c in self.columns if not c.is_generated], extra=("input",)
                ),
                "form_controls": self.get_update_form_controls_html(),
            },
        )

    def add_delete_form(self) -> Path:
        return self._render(
            "components/table/delete-form.tsx.j2",
            f"{self._components_dir}/{self.table.singular_kebab_case}-delete-form.tsx",
        )

    def get_form_controls_imports(
        self, columns: list[ResolvedColumn], extra: tuple[str, ...] = ()
    ) -> str:
        components: dict[str, None] = dict.fromkeys(extra)
        for column in columns:
            for component in column.strategy.form_components:
                components[component] = None
        return "".join(
            FORM_COMPONENT_IMPORTS[c] + "\n" for c in components if c in FORM_COMPONENT_IMPORTS
        )

    def get_form_controls_html(self, columns: list[ResolvedColumn]) -> str:
        fragments = []
        for column in columns:
            template = self._form_template(column, column.strategy.form_template)
            fragments.append(self._render_control(template, column))
        return "\n".join(fragments)

    def get_update_form_controls_html(self) -> str:
        """Hidden ``id`` first, then one control per column in caller order."""
        fragments = [self._render_control(UPDATE_INPUT_HIDDEN, None)]
        for column in self.columns:
            if column.is_generated:
                template = UPDATE_INPUT_HIDDEN
            else:
                template = self._form_template(column, column.strategy.update_form_template)
            fragments.append(self._render_control(template, column))
        return "\n".join(fragments)

    def _form_template(self, column: ResolvedColumn, template: str | None) -> str:
        if template is None:
            raise FormNotRenderableError(column.descriptor.name, column.data_type)
        return template

    def _render_control(self, template: str, column: ResolvedColumn | None) -> str:
        context = {"table": self.table, "column": column}
        return self.renderer.render(template, context).rstrip("\n")

    # -- Shared registrations ----------------------------------------------

    def register_schema_index(self) -> Path:
        """Import the table's schema module into ``lib/schema.ts``.

        The index file is bootstrapped from a template the first time any
        table is scaffolded; later runs only add their own lines.
        """
        index = self.root / SCHEMA_INDEX_PATH
        self.renderer.render_to_file_if_not_exists("lib/schema.ts.j2", index, {})
        name = self.table.plural_camel_case
        prepend_to_file_if_not_exists(
            index, f'import * as {name} from "@/schema/{self.table.plural_kebab_case}";\n'
        )
        insert_text_before_if_not_exists(index, SCHEMA_INDEX_ANCHOR, f"  ...{name},\n")
        self.written.append(index)
        return index

    def add_sidebar_link(self) -> Path | None:
        """Link the list page from the admin or private sidebar, when present."""
        sidebar = SIDEBARS.get(self.request.authorization_level)
        if sidebar is None:
            return None
        relative_path, anchor = sidebar
        path = self.root / relative_path
        if not path.is_file():
            return None
        url = f"{URL_PREFIXES[self.request.authorization_level]}{self.table.plural_kebab_case}"
        link = (
            f'  {{ title: "{self.table.plural_capital_case}", url: "{url}", icon: Table2Icon }},\n'
        )
        if insert_text_before_if_not_exists(path, anchor, link):
            self.written.append(path)
        return path

    def print_completion_message(self) -> None:
        print_success(f"scaffold success: {self.request.table}")
        print_checklist("scaffold checklist")
        for command in COMPLETION_COMMANDS:
            print_cmd(command)
