"""Form-data extraction fragments for generated server actions.

Each helper returns one line of an object literal that reads a field from a
submitted ``FormData`` and coerces it to the column's runtime type.
"""

from __future__ import annotations

from ..pk_strategy import PkStrategy


def integer(key: str, column: str) -> str:
    return f'    {key}: parseInt(formData.get("{column}") as string),\n'


def float_(key: str, column: str) -> str:
    return f'    {key}: parseFloat(formData.get("{column}") as string),\n'


def boolean(key: str, column: str) -> str:
    return f'    {key}: !!formData.get("{column}"),\n'


def string(key: str, column: str) -> str:
    return f'    {key}: formData.get("{column}") as string,\n'


def json(key: str, column: str) -> str:
    return (
        f'    {key}: formData.get("{column}") '
        f'? JSON.parse(formData.get("{column}") as string) : null,\n'
    )


def date(key: str, column: str) -> str:
    return f'    {key}: new Date(formData.get("{column}") as string),\n'


def bigint(key: str, column: str) -> str:
    return f'    {key}: BigInt(formData.get("{column}") as string),\n'


def references(key: str, column: str, pk_strategy: PkStrategy = PkStrategy.UUIDV7) -> str:
    """Foreign keys arrive as the referenced row's id, typed like the target's pk."""
    if pk_strategy is PkStrategy.AUTO_INCREMENT:
        return integer(key, column)
    return string(key, column)
