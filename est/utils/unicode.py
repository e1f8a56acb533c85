"""
Unicode classification tables shared by the query parser and ortho engines.

Everything here is compiled once, on first import, and is read-only afterwards.
The standard library has no notion of Unicode scripts or the Blank class, so
the `regex` module supplies the property lookups.
"""

from functools import lru_cache
from typing import Callable

import regex

# Pattern fragments, spliced into the query grammar
IDENTIFIER = r"\p{ID_Start}\p{ID_Continue}*"
BLANK = r"\p{Blank}"
NON_BLANK = r"\P{Blank}"

_SCRIPT_NAME = regex.compile(r"[A-Za-z][A-Za-z0-9 _-]*")


class UnknownScript(ValueError):
    """Raised when a script name is not a Unicode script or script alias."""


@lru_cache(maxsize=None)
def script_matcher(name: str) -> Callable[[str], bool]:
    """
    Build a predicate telling whether any character of a string has a script.

    Matching uses Script_Extensions, so characters shared between scripts
    (e.g. the ideographic full stop) count for every script they serve.

    Args:
        name: Script name or alias, matched loosely ("Han", "hani", "Latin")

    Raises:
        UnknownScript: if the name is not a Unicode script
    """
    if not isinstance(name, str) or not _SCRIPT_NAME.fullmatch(name):
        raise UnknownScript(f"Invalid script name: {name!r}")

    try:
        pattern = regex.compile(r"\p{Script_Extensions=%s}" % name)
    except regex.error as e:
        raise UnknownScript(f"Unknown Unicode script: {name!r}") from e

    return lambda text: pattern.search(text) is not None


def has_script(text: str, name: str) -> bool:
    """True if any character of text belongs to the named script."""
    return script_matcher(name)(text)
