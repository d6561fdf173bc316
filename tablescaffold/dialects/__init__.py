"""Per-dialect strategy tables and the factory that selects one.

Quick usage::

    from tablescaffold.dialects import dialect_strategy_factory

    strategy = dialect_strategy_factory("sqlite")
    strategy.get_data_type_strategy("boolean").sql_type  # "integer"
"""

from __future__ import annotations

from ..errors import UnknownDialectError
from .base import ColumnFragmentOpts, DataTypeStrategy, DialectStrategy
from .mysql import MYSQL_DIALECT_STRATEGY
from .postgresql import POSTGRESQL_DIALECT_STRATEGY
from .sqlite import SQLITE_DIALECT_STRATEGY

DIALECT_STRATEGIES: dict[str, DialectStrategy] = {
    "sqlite": SQLITE_DIALECT_STRATEGY,
    "postgresql": POSTGRESQL_DIALECT_STRATEGY,
    "mysql": MYSQL_DIALECT_STRATEGY,
}


def dialect_strategy_factory(dialect: str) -> DialectStrategy:
    """Return the strategy bound to *dialect*; unknown ids are never defaulted."""
    try:
        return DIALECT_STRATEGIES[dialect]
    except KeyError:
        raise UnknownDialectError(dialect) from None


__all__ = [
    "ColumnFragmentOpts",
    "DIALECT_STRATEGIES",
    "DataTypeStrategy",
    "DialectStrategy",
    "dialect_strategy_factory",
]
