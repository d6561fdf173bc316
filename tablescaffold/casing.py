"""Naming-convention variants for table and column identifiers.

``case_factory`` turns a raw identifier (``blog_post``, ``blogPost``,
``blog-post``) into a ``Cases`` value object holding every rendering the
templates need: snake, camel, pascal, kebab and capital case, each in
singular and plural form.
"""

from __future__ import annotations

import re
from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from .inflection import pluralize as _pluralize
from .inflection import singularize as _singularize


class Cases(BaseModel):
    """Immutable set of case variants derived from one identifier."""

    model_config = ConfigDict(frozen=True)

    original: str
    original_camel_case: str
    original_capital_case: str
    singular_snake_case: str
    singular_camel_case: str
    singular_pascal_case: str
    singular_kebab_case: str
    singular_capital_case: str
    plural_snake_case: str
    plural_camel_case: str
    plural_pascal_case: str
    plural_kebab_case: str
    plural_capital_case: str


@lru_cache(maxsize=512)
def case_factory(value: str, pluralize: bool = True) -> Cases:
    """Build the ``Cases`` for *value*.

    With ``pluralize=False`` the singular and plural fields are identical
    renderings of *value* itself; projects that disable pluralization get the
    same name regardless of grammatical number.
    """
    if pluralize:
        singular = _singularize(value)
        plural = _pluralize(value)
    else:
        singular = plural = value

    return Cases(
        original=value,
        original_camel_case=camel_case(value),
        original_capital_case=capital_case(value),
        singular_snake_case=snake_case(singular),
        singular_camel_case=camel_case(singular),
        singular_pascal_case=pascal_case(singular),
        singular_kebab_case=kebab_case(singular),
        singular_capital_case=capital_case(singular),
        plural_snake_case=snake_case(plural),
        plural_camel_case=camel_case(plural),
        plural_pascal_case=pascal_case(plural),
        plural_kebab_case=kebab_case(plural),
        plural_capital_case=capital_case(plural),
    )


# ---------------------------------------------------------------------------
# Case conversion
# ---------------------------------------------------------------------------


def split_words(value: str) -> list[str]:
    """Split an identifier into words.

    Splits on any non-alphanumeric character and on case boundaries:
    ``"blogPost"`` and ``"blog_post"`` both give ``["blog", "Post"]`` /
    ``["blog", "post"]``; ``"HTMLParser"`` gives ``["HTML", "Parser"]``.
    """
    s = re.sub(r"([a-z0-9])([A-Z])", r"\1 \2", value)
    s = re.sub(r"([A-Z])([A-Z][a-z])", r"\1 \2", s)
    return [w for w in re.split(r"[\W_]+", s) if w]


def snake_case(value: str) -> str:
    """Convert ``SomeThing`` or ``some-thing`` to ``some_thing``."""
    return "_".join(w.lower() for w in split_words(value))


def kebab_case(value: str) -> str:
    """Convert ``SomeThing`` or ``some_thing`` to ``some-thing``."""
    return "-".join(w.lower() for w in split_words(value))


def pascal_case(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``SomeThing``."""
    return "".join(w[0].upper() + w[1:].lower() for w in split_words(value))


def camel_case(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``someThing``."""
    pascal = pascal_case(value)
    if pascal:
        return pascal[0].lower() + pascal[1:]
    return ""


def capital_case(value: str) -> str:
    """Convert ``some_thing`` to ``Some Thing``."""
    return " ".join(w[0].upper() + w[1:].lower() for w in split_words(value))
