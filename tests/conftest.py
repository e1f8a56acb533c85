"""
Shared test fixtures for the est test suite.

Provides a realistic engine configuration, both as a parsed dict and as a
real config.toml on disk (no mocking of the filesystem).
"""

import pytest
import toml

from est.search import Instance

CONFIG_TOML = """\
default = "google"

[settings.logging]
level = "DEBUG"

[[engines]]
id = "google"
type = "cloze"
template = "https://www.google.com/search?q={}"
shorthand = "g"
description = "Google"

[[engines]]
id = "github"
type = "cloze"
shorthand = ["gh", "hub"]

[engines.template]
default = "https://github.com/search?q={}"
scoped = "https://github.com/{!}/search?q={}"

[[engines]]
id = "rust"
type = "namespace"
default = "rust-std"
description = "Rust documentation"

[engines.children]
docs = "docs-rs"
crates = "crates-io"

[[engines]]
id = "rust-std"
type = "cloze"
template = "https://doc.rust-lang.org/std/?search={}"

[[engines]]
id = "docs-rs"
type = "cloze"
template = "https://docs.rs/{}"

[[engines]]
id = "crates-io"
type = "cloze"
template = "https://crates.io/search?q={}"

[[engines]]
id = "r"
type = "alias"
to = "rust"

[[engines]]
id = "dict"
type = "ortho"
default = "en-dict"
script = "Han"
to = "zh-dict"

[[engines]]
id = "en-dict"
type = "cloze"
template = "https://www.merriam-webster.com/dictionary/{}"

[[engines]]
id = "zh-dict"
type = "cloze"
template = "https://www.zdic.net/hans/{}"

[[engines]]
id = "wiki"
type = "ortho"
default = "google"
scripts = [{ script = "Hiragana", to = "wiki-ja" }, { script = "Han", to = "wiki-zh" }]

[[engines]]
id = "wiki-ja"
type = "cloze"
template = "https://ja.wikipedia.org/wiki/{}"

[[engines]]
id = "wiki-zh"
type = "cloze"
template = "https://zh.wikipedia.org/wiki/{}"

[[engines]]
id = "lang"
type = "namespace"

[engines.children]
rs = "rust"
"""


@pytest.fixture
def config_data():
    """The sample configuration, parsed."""
    return toml.loads(CONFIG_TOML)


@pytest.fixture
def tmp_config(tmp_path):
    """Write the sample configuration to a real config.toml."""
    config_path = tmp_path / "config.toml"
    config_path.write_text(CONFIG_TOML, encoding="utf-8")
    return config_path


@pytest.fixture
def instance(config_data):
    """A composed Instance built from the sample configuration."""
    return Instance.compose(config_data)
