"""Primary-key generation strategies.

Each strategy decides how the ``id`` column of a scaffolded table gets its
value, which import the schema file needs for it, and how the generated
server actions coerce an ``id`` read back from submitted form data.
"""

from __future__ import annotations

from enum import Enum

from .errors import UnknownPkStrategyError


class PkStrategy(str, Enum):
    """Supported primary-key strategies."""
    CUID2 = "cuid2"
    UUIDV7 = "uuidv7"
    UUIDV4 = "uuidv4"
    NANOID = "nanoid"
    AUTO_INCREMENT = "auto_increment"


PK_STRATEGY_IMPORT_TEMPLATES: dict[PkStrategy, str] = {
    PkStrategy.CUID2: 'import { createId } from "@paralleldrive/cuid2";',
    PkStrategy.UUIDV7: 'import { uuidv7 } from "uuidv7";',
    PkStrategy.UUIDV4: "",
    PkStrategy.NANOID: 'import { nanoid } from "nanoid";',
    PkStrategy.AUTO_INCREMENT: "",
}

PK_FUNCTION_INVOKE: dict[PkStrategy, str] = {
    PkStrategy.CUID2: "createId()",
    PkStrategy.UUIDV7: "uuidv7()",
    PkStrategy.UUIDV4: "crypto.randomUUID()",
    PkStrategy.NANOID: "nanoid()",
    PkStrategy.AUTO_INCREMENT: "",
}

PK_JS_TYPES: dict[PkStrategy, str] = {
    PkStrategy.CUID2: "string",
    PkStrategy.UUIDV7: "string",
    PkStrategy.UUIDV4: "string",
    PkStrategy.NANOID: "string",
    PkStrategy.AUTO_INCREMENT: "number",
}


def resolve_pk_strategy(value: str | PkStrategy) -> PkStrategy:
    """Return the ``PkStrategy`` for *value* or raise ``UnknownPkStrategyError``."""
    try:
        return PkStrategy(value)
    except ValueError as exc:
        raise UnknownPkStrategyError(str(value)) from exc
