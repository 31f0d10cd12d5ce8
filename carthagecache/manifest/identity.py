"""
Library identities and name normalization.

A LibraryIdentity is one dependency at one version. Identities built from
Cartfile.resolved carry the raw origin in ``source_path``; identities built
from the cache listing do not. Equality only looks at ``(name, version)``.
"""

import re
from dataclasses import dataclass, field
from typing import Optional, Tuple
from urllib.parse import urlsplit

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")

# Suffixes removed when deriving the on-disk cache directory name
KNOWN_SUFFIXES = (".json", ".git")


def strip_quotes(value: str) -> str:
    return value.replace('"', "")


def strip_suffix(value: str, suffix: str) -> str:
    if suffix and value.endswith(suffix):
        return value[: -len(suffix)]
    return value


def has_scheme(value: str) -> bool:
    """
    Check if an origin is a URL with a scheme.

    ``host:owner/repo`` tokens are not URLs even though ``host`` would be a
    syntactically valid scheme, so the ``://`` separator is required.

    Example:
        >>> has_scheme("https://github.com/Foo/Bar.git")
        True
        >>> has_scheme("git@github.com:Foo/Bar.git")
        False
    """
    return bool(_SCHEME_RE.match(value))


def _segments(path: str):
    return [s for s in re.split(r"[/\\]", path) if s]


def _repo_path(token: str) -> str:
    parts = token.split(":")
    return parts[1] if len(parts) == 2 else token


def normalize_name(origin: str) -> str:
    """
    Derive the canonical library name from a manifest origin.

    Rules, in order:
        1. URL with a scheme: last path segment, ``.json`` suffix removed
        2. Path-like token without ``:``: non-empty segments joined by ``/``
        3. ``host:owner/repo``: the part after ``:``, ``.git`` suffix removed.
           Tokens with more than one ``:`` are kept whole.

    Example:
        >>> normalize_name('"https://example.com/specs/Foo.json"')
        'Foo'
        >>> normalize_name('"Alamofire/Alamofire"')
        'Alamofire/Alamofire'
        >>> normalize_name('"git@github.com:Foo/Bar.git"')
        'Foo/Bar'
    """
    token = strip_quotes(origin)

    if has_scheme(token):
        parts = urlsplit(token)
        segments = _segments(parts.path)
        last = segments[-1] if segments else parts.netloc
        return strip_suffix(last, ".json")

    if ":" not in token:
        return "/".join(_segments(token))

    return strip_suffix("/".join(_segments(_repo_path(token))), ".git")


def normalize_version(value: str) -> str:
    return strip_suffix(strip_quotes(value), ".git")


def _short_name(reference: str, suffixes=KNOWN_SUFFIXES) -> str:
    token = strip_quotes(reference)
    if has_scheme(token):
        token = urlsplit(token).path
    elif ":" in token:
        token = _repo_path(token)

    segments = _segments(token)
    short = segments[-1] if segments else ""
    for suffix in suffixes:
        short = strip_suffix(short, suffix)
    return short


def _is_safe_key(key: str) -> bool:
    return key not in ("", ".", "..")


@dataclass(frozen=True)
class LibraryIdentity:
    """
    One resolved dependency at a specific version.

    Attributes:
        name: Canonical identifier (see normalize_name)
        version: Resolved tag, commit or version string
        source_path: Raw origin from Cartfile.resolved, None for cache entries

    Example:
        >>> lib = LibraryIdentity("Alamofire/Alamofire", "5.8.1", "Alamofire/Alamofire")
        >>> lib.display_key
        'Alamofire'
        >>> lib.cache_key
        ('Alamofire', '5.8.1')
    """

    name: str
    version: str
    source_path: Optional[str] = field(default=None, compare=False)

    @property
    def display_key(self) -> str:
        """
        Short, filesystem-safe name used as the cache subdirectory.

        Derived from ``source_path`` when present, with ``.json`` and ``.git``
        removed. Otherwise the last segment of ``name``, unchanged.
        """
        if self.source_path:
            key = _short_name(self.source_path)
            if _is_safe_key(key):
                return key

        # Cache directory names are used as-is
        key = _short_name(self.name, suffixes=())
        return key if _is_safe_key(key) else "_"

    @property
    def cache_key(self) -> Tuple[str, str]:
        return (self.display_key, self.version)

    def __str__(self) -> str:
        return f"{self.display_key}@{self.version}"
