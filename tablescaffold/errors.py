"""Exception hierarchy for the scaffold engine.

Every error raised by the engine derives from ``ScaffoldError`` so that the
CLI can report it and exit with a non-zero status.  Errors are grouped by
cause:

- ``ConfigurationError`` -- bad input from the caller (unknown dialect, data
  type, constraint token, authorization level, malformed column spec).
- ``PreconditionError`` -- the project tree or template source does not look
  the way the generator expects (missing anchor, missing template).
- ``DataTypeNotImplementedError`` -- a reserved data type with no generator.
- ``FormNotRenderableError`` -- a column type that has no form control.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffold engine failures."""


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------


class ConfigurationError(ScaffoldError):
    """Raised when caller-supplied configuration cannot be resolved."""


class UnknownDialectError(ConfigurationError):
    def __init__(self, dialect: str) -> None:
        self.dialect = dialect
        super().__init__(f"invalid dialect: {dialect}")


class UnknownPkStrategyError(ConfigurationError):
    def __init__(self, pk_strategy: str) -> None:
        self.pk_strategy = pk_strategy
        super().__init__(f"invalid pk strategy: {pk_strategy}")


class UnknownDataTypeError(ConfigurationError):
    def __init__(self, data_type: str, dialect: str) -> None:
        self.data_type = data_type
        self.dialect = dialect
        super().__init__(f"invalid data type {data_type!r} for dialect {dialect}")


class UnknownConstraintError(ConfigurationError):
    def __init__(self, constraint: str, column: str) -> None:
        self.constraint = constraint
        self.column = column
        super().__init__(f"invalid constraint {constraint!r} on column {column!r}")


class UnknownAuthorizationLevelError(ConfigurationError):
    def __init__(self, level: str) -> None:
        self.level = level
        super().__init__(f"invalid authorization level: {level}")


class InvalidColumnSpecError(ConfigurationError):
    def __init__(self, raw: str, reason: str) -> None:
        self.raw = raw
        super().__init__(f"invalid column spec {raw!r}: {reason}")


class DuplicateColumnNameError(ConfigurationError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"duplicate column name: {name}")


# ---------------------------------------------------------------------------
# Precondition errors
# ---------------------------------------------------------------------------


class PreconditionError(ScaffoldError):
    """Raised when the target project or template tree has an unexpected shape."""


class AnchorNotFoundError(PreconditionError):
    def __init__(self, path: Path, anchor: str) -> None:
        self.path = path
        self.anchor = anchor
        super().__init__(f"anchor {anchor!r} not found in {path}")


class TargetFileNotFoundError(PreconditionError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"file not found: {path}")


class TemplateMissingError(PreconditionError):
    def __init__(self, template_path: str) -> None:
        self.template_path = template_path
        super().__init__(f"template not found: {template_path}")


class RouteGroupMissingError(PreconditionError):
    def __init__(self, route_group: Path) -> None:
        self.route_group = route_group
        super().__init__(
            f"{route_group.name} route group not found. authorization must be enabled."
        )


# ---------------------------------------------------------------------------
# Strategy errors
# ---------------------------------------------------------------------------


class DataTypeNotImplementedError(ScaffoldError, NotImplementedError):
    def __init__(self, data_type: str, dialect: str, operation: str) -> None:
        self.data_type = data_type
        self.dialect = dialect
        self.operation = operation
        super().__init__(
            f"{operation} is not implemented for data type {data_type!r} ({dialect})"
        )


class FormNotRenderableError(ScaffoldError):
    def __init__(self, column: str, data_type: str) -> None:
        self.column = column
        self.data_type = data_type
        super().__init__(
            f"column {column!r} of type {data_type!r} has no form control"
        )
