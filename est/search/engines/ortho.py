"""
Ortho Engine - Route by the writing system of the query content.

The mention path plays no part. Script rules are tested in order; the
first script with at least one character in the content wins. Otherwise
the query goes to the default engine.

Config (single script):
    [[engines]]
    id = "dict"
    type = "ortho"
    default = "en-dict"
    script = "Han"
    to = "zh-dict"

Config (ordered):
    [[engines]]
    id = "wiki"
    type = "ortho"
    default = "wiki-en"
    scripts = [
        { script = "Hiragana", to = "wiki-ja" },
        { script = "Han", to = "wiki-zh" },
    ]
"""

from ...errors import ConfigError
from ...utils.unicode import UnknownScript, script_matcher
from ..reaction import Forward
from .base import Engine, require_str


class Ortho(Engine):
    """Forward to the engine of the first script found in the content."""

    def __init__(self, identifier: str, default: str, scripts: list[tuple[str, str]]):
        super().__init__(identifier)
        self.default = default
        self.scripts = list(scripts)
        try:
            self._rules = [(script_matcher(script), to) for script, to in self.scripts]
        except UnknownScript as e:
            raise ConfigError(f"ortho engine '{identifier}': {e}") from e

    @classmethod
    def single(cls, identifier: str, default: str, script: str, to: str) -> "Ortho":
        return cls(identifier, default, [(script, to)])

    def react(self, query, instance):
        for matches, to in self._rules:
            if matches(query.content):
                return Forward(to, 1)
        return Forward(self.default, 1)

    @classmethod
    def compose(cls, identifier: str, spec: dict) -> "Ortho":
        default = require_str(spec, "default", "ortho", identifier)

        if "scripts" in spec:
            rules = spec["scripts"]
            if not isinstance(rules, list):
                raise ConfigError(f"ortho engine '{identifier}': 'scripts' must be an array")
            scripts = []
            for rule in rules:
                if not isinstance(rule, dict):
                    raise ConfigError(
                        f"ortho engine '{identifier}': each script rule must be a table"
                    )
                scripts.append((
                    require_str(rule, "script", "ortho", identifier),
                    require_str(rule, "to", "ortho", identifier),
                ))
            return cls(identifier, default, scripts)

        return cls.single(
            identifier,
            default,
            require_str(spec, "script", "ortho", identifier),
            require_str(spec, "to", "ortho", identifier),
        )
