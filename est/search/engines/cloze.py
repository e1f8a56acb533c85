"""
Cloze Engine - Fill the blank in a URL template with the query content.

Works like a browser's custom search engine, except that the placeholder
is "{}". A scoped variant adds a "{!}" placeholder filled from the
query's !scope, used only when the query carries one.

Config:
    [[engines]]
    id = "google"
    type = "cloze"
    template = "https://www.google.com/search?q={}"

    [[engines]]
    id = "gh"
    type = "cloze"

    [engines.template]
    default = "https://github.com/search?q={}"
    scoped = "https://github.com/{!}/search?q={}"
"""

import re

from loguru import logger

from ...errors import ConfigError
from ..reaction import Navigate
from .base import Engine

PLACEHOLDER = "{}"
PLACEHOLDER_SCOPE = "{!}"

_PLACEHOLDERS = re.compile(r"\{!?\}")


class Cloze(Engine):
    """Substitute content into a single template and navigate."""

    def __init__(self, identifier: str, template: str):
        super().__init__(identifier)
        self.template = template

    def react(self, query, instance):
        url = self.template.replace(PLACEHOLDER, query.content)
        return Navigate.from_str(url, blame_config=True)

    @classmethod
    def compose(cls, identifier: str, spec: dict) -> "Cloze":
        """Build a Cloze, or a ClozeScoped when the template is a default/scoped pair."""
        template = spec.get("template")

        if isinstance(template, str):
            return cls(identifier, template)

        if isinstance(template, dict):
            default, scoped = template.get("default"), template.get("scoped")
            if isinstance(default, str) and isinstance(scoped, str):
                return ClozeScoped(identifier, default, scoped)

        raise ConfigError(
            f"cloze engine '{identifier}': 'template' must be a string "
            f"or a table with 'default' and 'scoped' strings"
        )


class ClozeScoped(Cloze):
    """Cloze with a second template used when the query has a scope."""

    def __init__(self, identifier: str, default: str, scoped: str):
        super().__init__(identifier, default)
        self.scoped = scoped
        if PLACEHOLDER_SCOPE not in scoped:
            logger.warning(
                f"Scoped template of cloze engine '{identifier}' has no '{PLACEHOLDER_SCOPE}' placeholder"
            )

    def react(self, query, instance):
        if query.scope is None:
            return super().react(query, instance)

        # Single pass, so a scope containing "{}" is left as typed
        fill = {PLACEHOLDER: query.content, PLACEHOLDER_SCOPE: query.scope}
        url = _PLACEHOLDERS.sub(lambda m: fill[m.group()], self.scoped)
        return Navigate.from_str(url, blame_config=True)
