"""English pluralization and singularization for identifiers.

Rules are applied to the end of the whole identifier, so ``foo_bar`` becomes
``foo_bars`` and ``BlogPost`` becomes ``BlogPosts``.  Lookup order is:

1. uncountable words (returned unchanged),
2. irregular words (``person`` / ``people``),
3. suffix rules, highest priority first; the first matching rule wins.

The casing of the replaced suffix follows the casing of the text it replaces.
"""

from __future__ import annotations

import re
from typing import Pattern


# ---------------------------------------------------------------------------
# Word tables
# ---------------------------------------------------------------------------

IRREGULARS: dict[str, str] = {
    "i": "we",
    "me": "us",
    "he": "they",
    "she": "they",
    "them": "them",
    "myself": "ourselves",
    "yourself": "yourselves",
    "itself": "themselves",
    "herself": "themselves",
    "himself": "themselves",
    "themself": "themselves",
    "is": "are",
    "was": "were",
    "has": "have",
    "this": "these",
    "that": "those",
    "echo": "echoes",
    "dingo": "dingoes",
    "volcano": "volcanoes",
    "tornado": "tornadoes",
    "torpedo": "torpedoes",
    "genus": "genera",
    "viscus": "viscera",
    "stigma": "stigmata",
    "stoma": "stomata",
    "dogma": "dogmata",
    "lemma": "lemmata",
    "schema": "schemata",
    "anathema": "anathemata",
    "ox": "oxen",
    "axe": "axes",
    "die": "dice",
    "yes": "yeses",
    "foot": "feet",
    "eave": "eaves",
    "goose": "geese",
    "tooth": "teeth",
    "quiz": "quizzes",
    "human": "humans",
    "proof": "proofs",
    "carve": "carves",
    "valve": "valves",
    "looey": "looies",
    "thief": "thieves",
    "groove": "grooves",
    "pickaxe": "pickaxes",
    "passerby": "passersby",
}

IRREGULAR_SINGULARS: dict[str, str] = {plural: single for single, plural in IRREGULARS.items()}

UNCOUNTABLES: frozenset[str] = frozenset({
    "adulthood", "advice", "agenda", "aid", "aircraft", "alcohol", "ammo",
    "analytics", "anime", "athletics", "audio", "bison", "blood", "bream",
    "buffalo", "butter", "carp", "cash", "chassis", "chess", "clothing",
    "cod", "commerce", "cooperation", "corps", "debris", "diabetes",
    "digestion", "elk", "energy", "equipment", "excretion", "expertise",
    "firmware", "flounder", "fun", "gallows", "garbage", "graffiti",
    "hardware", "headquarters", "health", "herpes", "highjinks", "homework",
    "housework", "information", "jeans", "justice", "kudos", "labour",
    "literature", "machinery", "mackerel", "mail", "media", "mews", "moose",
    "music", "mud", "manga", "news", "only", "personnel", "pike", "plankton",
    "pliers", "police", "pollution", "premises", "rain", "research", "rice",
    "salmon", "scissors", "series", "sewage", "shambles", "shrimp",
    "software", "staff", "swine", "tennis", "traffic", "transportation",
    "trout", "tuna", "wealth", "welfare", "whiting", "wildebeest",
    "wildlife", "you",
})

_UNCOUNTABLE_PATTERNS: list[str] = [
    r"pok[eé]mon$",
    r"[^aeiou]ese$",
    r"deer$",
    r"fish$",
    r"measles$",
    r"o[iu]s$",
    r"pox$",
    r"sheep$",
]


def _compile(rules: list[tuple[str, str]]) -> list[tuple[Pattern[str], str]]:
    keep = [(re.compile(p, re.IGNORECASE), r"\g<0>") for p in _UNCOUNTABLE_PATTERNS]
    return keep + [(re.compile(p, re.IGNORECASE), r) for p, r in rules]


# Highest priority first.
_PLURAL_RULES = _compile([
    (r"m[ae]n$", "men"),
    (r"eaux$", r"\g<0>"),
    (r"(child)(?:ren)?$", r"\1ren"),
    (r"(pe)(?:rson|ople)$", r"\1ople"),
    (r"\b((?:tit)?m|l)(?:ice|ouse)$", r"\1ice"),
    (r"(matr|cod|mur|sil|vert|ind|append)(?:ix|ex)$", r"\1ices"),
    (r"(x|ch|ss|sh|zz)$", r"\1es"),
    (r"([^ch][ieo][ln])ey$", r"\1ies"),
    (r"([^aeiouy]|qu)y$", r"\1ies"),
    (r"(?:(kni|wi|li)fe|(ar|l|ea|eo|oa|hoo)f)$", r"\1\2ves"),
    (r"sis$", "ses"),
    (
        r"(apheli|hyperbat|periheli|asyndet|noumen|phenomen|criteri|organ"
        r"|prolegomen|hedr|automat)(?:a|on)$",
        r"\1a",
    ),
    (
        r"(agend|addend|millenni|dat|extrem|bacteri|desiderat|strat|candelabr"
        r"|errat|ov|symposi|curricul|automat|quor)(?:a|um)$",
        r"\1a",
    ),
    (r"(her|at|gr)o$", r"\1oes"),
    (r"(seraph|cherub)(?:im)?$", r"\1im"),
    (r"(alumn|alg|vertebr)(?:a|ae)$", r"\1ae"),
    (
        r"(alumn|syllab|vir|radi|nucle|fung|cact|stimul|termin|bacill|foc"
        r"|uter|loc|strat)(?:us|i)$",
        r"\1i",
    ),
    (r"([^l]ias|[aeiou]las|[ejzr]as|[iu]am)$", r"\1"),
    (r"(e[mn]u)s?$", r"\1s"),
    (r"(alias|[^aou]us|t[lm]as|gas|ris)$", r"\1es"),
    (r"(ax|test)is$", r"\1es"),
    (r"([^aeiou]ese)$", r"\1"),
    (r"[^\x00-\x7F]$", r"\g<0>"),
    (r"s?$", "s"),
])

_SINGULAR_RULES = _compile([
    (r"men$", "man"),
    (r"(eau)x?$", r"\1"),
    (r"(child)ren$", r"\1"),
    (r"(pe)(rson|ople)$", r"\1rson"),
    (r"(matr|append)ices$", r"\1ix"),
    (r"(cod|mur|sil|vert|ind)ices$", r"\1ex"),
    (r"(alumn|alg|vertebr)ae$", r"\1a"),
    (
        r"(apheli|hyperbat|periheli|asyndet|noumen|phenomen|criteri|organ"
        r"|prolegomen|hedr|automat)a$",
        r"\1on",
    ),
    (
        r"(agend|addend|millenni|dat|extrem|bacteri|desiderat|strat|candelabr"
        r"|errat|ov|symposi|curricul|quor)a$",
        r"\1um",
    ),
    (
        r"(alumn|syllab|vir|radi|nucle|fung|cact|stimul|termin|bacill|foc"
        r"|uter|loc|strat)(?:us|i)$",
        r"\1us",
    ),
    (r"(test)(?:is|es)$", r"\1is"),
    (r"(movie|twelve|abuse|e[mn]u)s$", r"\1"),
    (r"(analy|diagno|parenthe|progno|synop|the|empha|cri|ne)(?:sis|ses)$", r"\1sis"),
    (
        r"(x|ch|ss|sh|zz|tto|go|cho|alias|[^aou]us|t[lm]as|gas|(?:her|at|gr)o"
        r"|[aeiou]ris)(?:es)?$",
        r"\1",
    ),
    (r"(seraph|cherub)im$", r"\1"),
    (r"\b((?:tit)?m|l)ice$", r"\1ouse"),
    (r"\b(mon|smil)ies$", r"\1ey"),
    (
        r"\b(l|(?:neck|cross|hog|aun)?t|coll|faer|food|gen|goon|group|hipp"
        r"|junk|vegg|(?:pork)?p|charl|calor|cut)ies$",
        r"\1ie",
    ),
    (r"(dg|ss|ois|lk|ok|wn|mb|th|ch|ec|oal|is|ck|ix|sser|ts|wb)ies$", r"\1ie"),
    (r"ies$", "y"),
    (r"(ar|(?:wo|[ae])l|[eo][ao])ves$", r"\1f"),
    (r"(wi|kni|(?:after|half|high|low|mid|non|night|[^\w]|^)li)ves$", r"\1fe"),
    (r"(ss)$", r"\1"),
    (r"s$", ""),
])


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def pluralize(word: str) -> str:
    """Return the plural form of *word*.

    Words that are already plural are returned unchanged, e.g.
    ``pluralize("users") -> "users"``.
    """
    return _replace_word(word, keep=IRREGULAR_SINGULARS, replace=IRREGULARS, rules=_PLURAL_RULES)


def singularize(word: str) -> str:
    """Return the singular form of *word*."""
    return _replace_word(word, keep=IRREGULARS, replace=IRREGULAR_SINGULARS, rules=_SINGULAR_RULES)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _replace_word(
    word: str,
    keep: dict[str, str],
    replace: dict[str, str],
    rules: list[tuple[Pattern[str], str]],
) -> str:
    token = word.lower()
    if token in keep:
        return _restore_case(word, token)
    if token in replace:
        return _restore_case(word, replace[token])
    if not token or token in UNCOUNTABLES:
        return word
    for pattern, replacement in rules:
        if pattern.search(word):
            return pattern.sub(lambda m: _interpolate(word, m, replacement), word, count=1)
    return word


def _interpolate(word: str, match: re.Match[str], replacement: str) -> str:
    result = match.expand(replacement)
    matched = match.group(0)
    if matched == "":
        # Empty match: take the casing of the preceding character.
        start = match.start()
        return _restore_case(word[start - 1] if start else word, result)
    return _restore_case(matched, result)


def _restore_case(word: str, token: str) -> str:
    if word == token or not token:
        return token
    if word == word.lower():
        return token.lower()
    if word == word.upper():
        return token.upper()
    if word[0] == word[0].upper():
        return token[0].upper() + token[1:].lower()
    return token.lower()
