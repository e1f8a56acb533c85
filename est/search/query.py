"""
Query - The structured form of what the user typed.

Grammar, segments in any order:
  @a.b.c     mention path (also fullwidth ＠, separator . or 。)
  !scope     scope text up to the next blank (also fullwidth ！)
  anything   content

Reduction:
  - The last mention and the last scope win.
  - Content segments are concatenated. A blank run is kept only when the
    previous non-blank segment was content, so "@m  foo bar" gives "foo bar"
    while "foo  @m bar" gives "foo  bar".
  - The result is trimmed of leading and trailing blanks. Only the Blank
    class (tab and space separators) is trimmed; newlines and other
    vertical whitespace are content, so a leading newline is kept.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional

import regex

from ..errors import EstError
from ..utils.unicode import BLANK, IDENTIFIER, NON_BLANK

SIGIL_MENTION = "@＠"
SIGIL_SCOPE = "!！"
SIGIL_PATH_SEP = ".。"

_SEGMENT = regex.compile(
    r"""
      (?P<blank>{blank}+)
    | [{mention}](?P<mention>(?>{ident}(?:[{sep}]{ident})*))(?![{sep}])
    | (?P<bad_mention>[{mention}])
    | [{scope}](?P<scope>{non_blank}*)
    | (?P<content>{non_blank}+)
    """.format(
        blank=BLANK,
        non_blank=NON_BLANK,
        ident=IDENTIFIER,
        mention=SIGIL_MENTION,
        scope=SIGIL_SCOPE,
        sep=SIGIL_PATH_SEP,
    ),
    regex.VERBOSE,
)
_PATH_SEP = regex.compile(f"[{SIGIL_PATH_SEP}]")


class QuerySyntaxError(EstError, ValueError):
    """The raw text is not a well-formed query."""

    def __init__(self, message: str, position: int):
        super().__init__(f"{message} (at position {position})")
        self.position = position


def _segments(text: str) -> Iterator[tuple[str, str]]:
    """Split raw text into (kind, value) segments, left to right."""
    pos = 0
    while pos < len(text):
        m = _SEGMENT.match(text, pos)
        if m is None or m.lastgroup == "bad_mention":
            raise QuerySyntaxError("expected an identifier path after mention sigil", pos)
        yield m.lastgroup, m.group(m.lastgroup)
        pos = m.end()


def parse_query(text: str) -> "Query":
    """
    Parse raw text into a Query.

    Raises:
        QuerySyntaxError: on a mention sigil without a complete identifier path
    """
    mention: list[str] = []
    scope: Optional[str] = None
    content: list[tuple[str, str]] = []
    in_content = False

    for kind, value in _segments(text):
        if kind != "blank":
            in_content = kind == "content"

        if kind == "mention":
            mention = _PATH_SEP.split(value)
        elif kind == "scope":
            scope = value
        elif kind == "content" or in_content:
            content.append((kind, value))

    # Blanks only follow content, so only trailing runs need dropping
    while content and content[-1][0] == "blank":
        content.pop()

    return Query(
        mention=mention,
        content="".join(value for _, value in content),
        scope=scope,
    )


@dataclass
class Query:
    """A parsed query. Only the resolution loop mutates `mention`."""
    mention: list[str] = field(default_factory=list)
    content: str = ""
    scope: Optional[str] = None

    @classmethod
    def parse(cls, text: str) -> "Query":
        return parse_query(text)

    @property
    def mention_head(self) -> str:
        """First mention segment, or "" (the default engine) if there is none."""
        return self.mention[0] if self.mention else ""

    @property
    def mention_tail(self) -> list[str]:
        return self.mention[1:]

    def __str__(self) -> str:
        parts = []
        if self.mention:
            parts.append("@" + ".".join(self.mention))
        if self.scope is not None:
            parts.append("!" + self.scope)
        if self.content:
            parts.append(self.content)
        return " ".join(parts)
