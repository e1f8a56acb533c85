"""
Reactions - What an engine decides to do with a query.

An engine either settles the query with Navigate (terminal) or hands it on
with Forward (the resolution loop rewrites the mention and tries again).
Failures are raised as ReactionError subclasses and end the resolution.
"""

from dataclasses import dataclass
from typing import Union
from urllib.parse import quote, urlsplit, urlunsplit

from ..errors import EstError


class AcceptanceError(EstError):
    """An engine refused a query during its pre-check."""


class NoEngine(AcceptanceError):
    """No such specified engine."""

    def __str__(self):
        return "No such specified engine."


class ReactionError(EstError):
    """Base class for errors that end a resolution."""


class Nothing(ReactionError):
    """Nothing matched the query. A user outcome, not a bug."""

    def __str__(self):
        return "Not found."


class BadConfig(ReactionError):
    """An engine's own configuration produced an invalid result."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def __str__(self):
        return f"Invalid configuration: {self.detail}"


class NotAccepted(ReactionError):
    """An engine's accept() check rejected the query."""

    def __init__(self, reason: AcceptanceError):
        super().__init__(reason)
        self.reason = reason

    def __str__(self):
        return f"Query not accepted: {self.reason}"


class Panic(ReactionError):
    """Unexpected internal failure."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def __str__(self):
        return f"Est core failure: {self.detail}"


class TooManyForward(ReactionError):
    """The resolution loop hit its hop ceiling."""

    def __init__(self, hops: int = 0, trail=()):
        super().__init__(hops)
        self.hops = hops
        self.trail = list(trail)

    def __str__(self):
        msg = "Too many forwards before deciding on an engine to process the query."
        if self.trail:
            msg += f" Trail: {' -> '.join(self.trail)}"
        return msg


# Schemes that cannot exist without a host (WHATWG "special" schemes minus file)
_HOST_SCHEMES = {"http", "https", "ftp", "ws", "wss"}
_FORBIDDEN_HOST_CHARS = set(" \t\n\r#%/:<>?@[\\]^|")

# Characters left alone when percent-encoding each component
_PATH_SAFE = "/%:@!$&'()*+,;=~"
_QUERY_SAFE = _PATH_SAFE + "?"
_FRAGMENT_SAFE = _QUERY_SAFE + "#"


def _encode_host(netloc: str) -> str:
    """IDNA-encode the host part of a netloc, leaving userinfo and port."""
    userinfo, at, hostport = netloc.rpartition("@")
    if hostport.startswith("["):
        return netloc
    host, colon, port = hostport.partition(":")
    if any(c in _FORBIDDEN_HOST_CHARS for c in host):
        raise ValueError(f"forbidden host code point in {host!r}")
    host = host.lower().encode("idna").decode("ascii")
    return f"{userinfo}{at}{host}{colon}{port}"


def normalize_url(text: str) -> str:
    """
    Parse an absolute URL and percent-encode it into a well-formed string.

    Raises:
        ValueError: if text is not an absolute, well-formed URL
    """
    text = text.strip()
    parts = urlsplit(text)

    # urlsplit only recognizes well-formed schemes
    scheme = parts.scheme
    if not scheme:
        raise ValueError("relative URL without a base")

    if scheme in _HOST_SCHEMES and not parts.hostname:
        raise ValueError("empty host")

    # Accessing .port validates it
    parts.port

    netloc = parts.netloc
    if parts.hostname:
        netloc = _encode_host(netloc)

    return urlunsplit((
        scheme,
        netloc,
        quote(parts.path, safe=_PATH_SAFE),
        quote(parts.query, safe=_QUERY_SAFE),
        quote(parts.fragment, safe=_FRAGMENT_SAFE),
    ))


@dataclass(frozen=True)
class Navigate:
    """Terminal reaction: send the user to this URL."""
    url: str

    @classmethod
    def from_str(cls, text: str, blame_config: bool) -> "Navigate":
        """
        Build a Navigate from raw URL text.

        Args:
            text: URL text, usually a filled-in template
            blame_config: if True an invalid URL is the configuration's fault
                (BadConfig), otherwise it is the user's (Nothing)
        """
        try:
            return cls(normalize_url(text))
        except ValueError as e:
            if blame_config:
                raise BadConfig(f"Invalid url: {e}") from e
            raise Nothing() from e


@dataclass(frozen=True)
class Forward:
    """
    Non-terminal reaction: prepend a mention segment, dropping `skip` leading ones.

    Given a query `@a.b.c`, the effect is:
      Forward("d", 0) -> @d.a.b.c
      Forward("d", 1) -> @d.b.c
      Forward("d", 2) -> @d.c
      Forward("d", 3) -> @d
      Forward("d", 4) -> @d
    """
    prepend: str
    skip: int = 1


Reaction = Union[Navigate, Forward]


def rewrite_mention(mention: list, prepend: str, skip: int) -> None:
    """Apply a Forward to a mention path in place."""
    if not mention:
        mention.append(prepend)
    elif skip == 0:
        mention.insert(0, prepend)
    elif skip == 1:
        mention[0] = prepend
    elif skip == 2:
        mention[0] = prepend
        if len(mention) > 1:
            del mention[1]
    else:
        mention[:] = [prepend] + mention[skip:]
