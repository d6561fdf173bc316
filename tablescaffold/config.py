"""tablescaffold project configuration.

The dialect, primary-key strategy and pluralization policy are decided once
per project and stored in ``scaffold.config.json`` at the project root.  The
settings use a Pydantic v2 model so they are validated at construction time
and serialised to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from .dialects import DIALECT_STRATEGIES, DialectStrategy, dialect_strategy_factory
from .errors import UnknownDialectError
from .pk_strategy import PkStrategy, resolve_pk_strategy

CONFIG_FILE_NAME = "scaffold.config.json"

_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class ProjectConfig(BaseModel):
    """Per-project scaffold settings.

    Instances are typically created once by the CLI entry point via
    :meth:`from_project` and then turned into a ``ScaffoldRequest``.
    """

    dialect: str = Field(default="sqlite", description="sqlite, postgresql or mysql")
    pk_strategy: PkStrategy = Field(default=PkStrategy.UUIDV7)
    pluralize_enabled: bool = Field(
        default=True, description="Use plural table names (posts) instead of post"
    )
    project_root: Path = Field(default=Path("."), exclude=True)
    config_file: str = Field(default=CONFIG_FILE_NAME, exclude=True)

    @field_validator("dialect")
    @classmethod
    def _check_dialect(cls, value: str) -> str:
        if value not in DIALECT_STRATEGIES:
            raise UnknownDialectError(value)
        return value

    @field_validator("pk_strategy", mode="before")
    @classmethod
    def _check_pk_strategy(cls, value: str | PkStrategy) -> PkStrategy:
        return resolve_pk_strategy(value)

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def config_path(self) -> Path:
        """Path to the JSON settings file inside the project."""
        return self.project_root / self.config_file

    def dialect_strategy(self) -> DialectStrategy:
        return dialect_strategy_factory(self.dialect)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path | None = None) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Defaults to :attr:`config_path`.

        Returns:
            The path where the file was written.
        """
        target = path or self.config_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2) + "\n", encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "ProjectConfig":
        """Load a previously-saved configuration from JSON.

        The project root is taken to be the directory holding the file.
        """
        path = Path(path)
        raw = path.read_text(encoding="utf-8")
        config = cls.model_validate_json(raw)
        return config.model_copy(
            update={"project_root": path.parent, "config_file": path.name}
        )

    @classmethod
    def from_env(cls, project_root: Path | None = None) -> "ProjectConfig":
        """Build a ``ProjectConfig`` from environment variables.

        Recognised variables (all optional):
            SCAFFOLD_DIALECT, SCAFFOLD_PK_STRATEGY, SCAFFOLD_PLURALIZE.
        """
        pluralize = os.environ.get("SCAFFOLD_PLURALIZE", "true").strip().lower()
        return cls(
            dialect=os.environ.get("SCAFFOLD_DIALECT", "sqlite"),
            pk_strategy=os.environ.get("SCAFFOLD_PK_STRATEGY", PkStrategy.UUIDV7.value),
            pluralize_enabled=pluralize not in _FALSE_VALUES,
            project_root=project_root or Path("."),
        )

    @classmethod
    def from_project(cls, project_root: Path) -> "ProjectConfig":
        """Load ``scaffold.config.json`` from *project_root*, else use the environment."""
        path = Path(project_root) / CONFIG_FILE_NAME
        if path.is_file():
            return cls.load(path)
        return cls.from_env(Path(project_root))
