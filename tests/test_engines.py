"""
Tests for the individual engine variants.

Engines are exercised directly through accept()/react(), without the
resolution loop.
"""

import pytest

from est.errors import ConfigError
from est.search import BadConfig, Forward, Navigate, NoEngine, Nothing, Query
from est.search.engines import ENGINE_TYPES, Alias, Cloze, ClozeScoped, Namespace, Ortho


def q(text):
    return Query.parse(text)


class TestAlias:
    """Test Alias forwarding."""

    def test_forwards_replacing_head(self):
        alias = Alias("g", "google")
        assert alias.react(q("@g foo"), None) == Forward("google", 1)

    def test_identifier(self):
        assert Alias("g", "google").identifier == "g"

    def test_compose_requires_target(self):
        with pytest.raises(ConfigError):
            Alias.compose("g", {})


class TestNamespace:
    """Test child routing and default fallthrough."""

    def test_child_consumes_two_segments(self):
        ns = Namespace("ns", {"x": "eng1"})
        assert ns.react(q("@ns.x rest"), None) == Forward("eng1", 2)

    def test_unknown_child_without_default_is_nothing(self):
        ns = Namespace("ns", {"x": "eng1"})
        query = q("@ns.y")
        ns.accept(query, None)
        with pytest.raises(Nothing):
            ns.react(query, None)

    def test_bare_namespace_without_default_is_rejected(self):
        ns = Namespace("ns", {"x": "eng1"})
        with pytest.raises(NoEngine):
            ns.accept(q("@ns foo"), None)

    def test_default_consumes_one_segment(self):
        ns = Namespace("ns", {"x": "eng1"}, default="fallback")
        assert ns.react(q("@ns.y foo"), None) == Forward("fallback", 1)
        assert ns.react(q("@ns foo"), None) == Forward("fallback", 1)

    def test_namespace_with_default_accepts_everything(self):
        ns = Namespace("ns", {}, default="fallback")
        ns.accept(q("@ns"), None)

    def test_child_wins_over_default(self):
        ns = Namespace("ns", {"x": "eng1"}, default="fallback")
        assert ns.react(q("@ns.x"), None) == Forward("eng1", 2)

    def test_compose(self):
        ns = Namespace.compose("ns", {"default": "d", "children": {"x": "eng1"}})
        assert ns.default == "d"
        assert ns.children == {"x": "eng1"}

    def test_compose_rejects_bad_children(self):
        with pytest.raises(ConfigError):
            Namespace.compose("ns", {"children": {"x": 1}})
        with pytest.raises(ConfigError):
            Namespace.compose("ns", {"children": ["x"]})


class TestCloze:
    """Test template substitution."""

    def test_substitutes_and_encodes(self):
        cloze = Cloze("ex", "https://example.com/search?q={}")
        reaction = cloze.react(q("foo bar"), None)
        assert reaction == Navigate("https://example.com/search?q=foo%20bar")

    def test_empty_content(self):
        cloze = Cloze("ex", "https://example.com/search?q={}")
        assert cloze.react(q(""), None).url == "https://example.com/search?q="

    def test_every_placeholder_is_filled(self):
        cloze = Cloze("ex", "https://example.com/{}?q={}")
        assert cloze.react(q("x"), None).url == "https://example.com/x?q=x"

    def test_invalid_result_blames_config(self):
        cloze = Cloze("broken", "example.com/search?q={}")
        with pytest.raises(BadConfig):
            cloze.react(q("foo"), None)

    def test_compose_plain(self):
        engine = Cloze.compose("ex", {"template": "https://example.com/{}"})
        assert type(engine) is Cloze

    def test_compose_scoped(self):
        engine = Cloze.compose("ex", {"template": {"default": "https://a/{}", "scoped": "https://a/{!}/{}"}})
        assert isinstance(engine, ClozeScoped)

    @pytest.mark.parametrize("spec", [
        {},
        {"template": 3},
        {"template": {"default": "https://a/{}"}},
    ])
    def test_compose_rejects_bad_template(self, spec):
        with pytest.raises(ConfigError):
            Cloze.compose("ex", spec)


class TestClozeScoped:
    """Test the scope-aware template."""

    def _engine(self):
        return ClozeScoped(
            "gh",
            "https://github.com/search?q={}",
            "https://github.com/{!}/search?q={}",
        )

    def test_without_scope_uses_default(self):
        assert self._engine().react(q("serde"), None).url == "https://github.com/search?q=serde"

    def test_with_scope_uses_scoped(self):
        url = self._engine().react(q("!rust-lang serde"), None).url
        assert url == "https://github.com/rust-lang/search?q=serde"

    def test_scope_is_not_resubstituted(self):
        url = self._engine().react(q("!{} serde"), None).url
        assert url == "https://github.com/%7B%7D/search?q=serde"


class TestOrtho:
    """Test script-based routing."""

    def test_single_script_match(self):
        ortho = Ortho.single("dict", "latin-engine", "Han", "cjk-engine")
        assert ortho.react(q("hello 世界"), None) == Forward("cjk-engine", 1)

    def test_single_script_default(self):
        ortho = Ortho.single("dict", "latin-engine", "Han", "cjk-engine")
        assert ortho.react(q("hello"), None) == Forward("latin-engine", 1)

    def test_mention_is_ignored(self):
        ortho = Ortho.single("dict", "latin-engine", "Han", "cjk-engine")
        assert ortho.react(q("@中文 hello"), None) == Forward("latin-engine", 1)

    def test_hierarchical_first_match_wins(self):
        ortho = Ortho("wiki", "en", [("Hiragana", "ja"), ("Han", "zh")])
        assert ortho.react(q("日本語です"), None) == Forward("ja", 1)
        assert ortho.react(q("中文"), None) == Forward("zh", 1)
        assert ortho.react(q("english"), None) == Forward("en", 1)

    def test_unknown_script_is_config_error(self):
        with pytest.raises(ConfigError):
            Ortho.single("dict", "d", "NotAScript", "x")

    def test_compose_single(self):
        ortho = Ortho.compose("dict", {"default": "d", "script": "Han", "to": "zh"})
        assert ortho.scripts == [("Han", "zh")]

    def test_compose_hierarchical(self):
        ortho = Ortho.compose("wiki", {
            "default": "en",
            "scripts": [{"script": "Hiragana", "to": "ja"}, {"script": "Han", "to": "zh"}],
        })
        assert ortho.scripts == [("Hiragana", "ja"), ("Han", "zh")]

    def test_compose_requires_default(self):
        with pytest.raises(ConfigError):
            Ortho.compose("dict", {"script": "Han", "to": "zh"})


def test_engine_types_cover_config_tags():
    assert set(ENGINE_TYPES) == {"alias", "cloze", "namespace", "ortho"}
