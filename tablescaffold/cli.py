"""Command line entry point for ``tablescaffold``.

Examples::

    tablescaffold init --dialect postgresql --pk-strategy uuidv4
    tablescaffold scaffold post -c title:text published:boolean -a admin
    python -m tablescaffold scaffold tag -c name:text -a public --root ./web
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from .config import ProjectConfig
from .dialects import DIALECT_STRATEGIES
from .errors import RouteGroupMissingError, ScaffoldError
from .pk_strategy import PkStrategy
from .scaffolder.generator import ROUTE_GROUPS, ScaffoldProcessor, ScaffoldRequest
from .utils import print_error, print_success, print_summary_table, print_written_files

# Route groups that only exist once authorization has been set up.
REQUIRED_ROUTE_GROUPS: dict[str, str] = {
    "admin": "(admin)",
    "private": "(private)",
}


def check_route_group(project_root: Path, authorization_level: str) -> None:
    """Fail unless the ``app/`` route group for *authorization_level* exists."""
    group = REQUIRED_ROUTE_GROUPS.get(authorization_level)
    if group is None:
        return
    route_group = project_root / "app" / group
    if not route_group.is_dir():
        raise RouteGroupMissingError(route_group)


# ---------------------------------------------------------------------------
# Sub-commands
# ---------------------------------------------------------------------------


def cmd_init(args: argparse.Namespace) -> None:
    root = Path(args.root)
    config = ProjectConfig(
        dialect=args.dialect,
        pk_strategy=args.pk_strategy,
        pluralize_enabled=not args.no_pluralize,
        project_root=root,
    )
    path = config.save()
    print_success(f"wrote {path}")


def cmd_scaffold(args: argparse.Namespace) -> None:
    root = Path(args.root)
    config = ProjectConfig.from_project(root)
    if args.dialect:
        config = config.model_copy(update={"dialect": args.dialect})
    if args.pk_strategy:
        config = config.model_copy(update={"pk_strategy": PkStrategy(args.pk_strategy)})

    check_route_group(root, args.authorization_level)

    request = ScaffoldRequest(
        table=args.table,
        columns=args.columns,
        authorization_level=args.authorization_level,
        db_dialect_strategy=config.dialect_strategy(),
        pk_strategy=config.pk_strategy,
        project_root=root,
        pluralize=config.pluralize_enabled,
        enable_schema_generation=not args.no_schema,
        enable_completion_message=True,
    )
    print_summary_table(
        {
            "Table": args.table,
            "Dialect": config.dialect,
            "Primary key": config.pk_strategy.value,
            "Authorization": args.authorization_level,
        },
        title="Scaffold",
    )
    written = ScaffoldProcessor(request).process()
    print_written_files(written, root)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tablescaffold",
        description="Generate schema, pages, actions and forms for a database table",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  tablescaffold scaffold post -c title:text published:boolean -a admin\n"
            "  tablescaffold scaffold comment -c post:references body:text -a private\n"
        ),
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    init = subparsers.add_parser("init", help="Write scaffold.config.json")
    init.add_argument("--root", default=".", help="Project root (default: .)")
    init.add_argument(
        "--dialect",
        default="sqlite",
        choices=sorted(DIALECT_STRATEGIES),
        help="Database dialect (default: sqlite)",
    )
    init.add_argument(
        "--pk-strategy",
        default=PkStrategy.UUIDV7.value,
        choices=[s.value for s in PkStrategy],
        help="Primary key strategy (default: uuidv7)",
    )
    init.add_argument(
        "--no-pluralize",
        action="store_true",
        help="Keep table names singular",
    )
    init.set_defaults(func=cmd_init)

    scaffold = subparsers.add_parser("scaffold", help="Scaffold CRUD code for one table")
    scaffold.add_argument("table", help="Table name, e.g. post or blog_post")
    scaffold.add_argument(
        "--columns", "-c",
        nargs="+",
        default=[],
        help="Column specs: name:type[:constraint,...]",
    )
    scaffold.add_argument(
        "--authorization-level", "-a",
        required=True,
        choices=sorted(ROUTE_GROUPS),
        help="Route group the generated pages live in",
    )
    scaffold.add_argument("--root", default=".", help="Project root (default: .)")
    scaffold.add_argument(
        "--no-schema",
        action="store_true",
        help="Skip the schema file (the table is already defined)",
    )
    scaffold.add_argument("--dialect", default=None, choices=sorted(DIALECT_STRATEGIES))
    scaffold.add_argument("--pk-strategy", default=None, choices=[s.value for s in PkStrategy])
    scaffold.set_defaults(func=cmd_scaffold)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``tablescaffold`` and ``python -m tablescaffold``."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except (ScaffoldError, ValidationError) as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
