"""tablescaffold scaffolder -- emits the CRUD bundle for one table.

This package takes a ``ScaffoldRequest`` and renders the schema file, pages,
server actions, column definitions and forms for that table into an
existing project, then registers the table in the shared schema index.

Quick usage::

    from tablescaffold.dialects import dialect_strategy_factory
    from tablescaffold.scaffolder import ScaffoldProcessor, ScaffoldRequest

    request = ScaffoldRequest(
        table="post",
        columns=["title:text", "published:boolean"],
        authorization_level="admin",
        db_dialect_strategy=dialect_strategy_factory("sqlite"),
        pk_strategy="uuidv7",
        project_root="/path/to/app",
    )
    written = ScaffoldProcessor(request).process()
"""

from tablescaffold.scaffolder.generator import (
    ScaffoldProcessor,
    ScaffoldRequest,
    ScaffoldStage,
)
from tablescaffold.scaffolder.templates import TemplateRenderer

__all__ = [
    "ScaffoldProcessor",
    "ScaffoldRequest",
    "ScaffoldStage",
    "TemplateRenderer",
]
