"""Fuzzy keyword matching between résumé and job keyword sets.

Two keywords match when, after normalization, they are equal, one
contains the other, or both touch the same group of the alias table
("k8s" and "Kubernetes", "Postgres" and "PostgreSQL").
"""

import re
from collections.abc import Iterable, Mapping
from types import MappingProxyType

_STRIP_RE = re.compile(r"[^a-z0-9\s+#.]")
_WHITESPACE_RE = re.compile(r"\s+")

# ---------------------------------------------------------------------------
# Technology aliases: canonical name -> alternative spellings
# ---------------------------------------------------------------------------
DEFAULT_ALIASES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "javascript": ("js", "ecmascript", "es6"),
    "typescript": ("ts",),
    "react": ("reactjs", "react.js"),
    "node": ("nodejs", "node.js"),
    "next": ("nextjs", "next.js"),
    "vue": ("vuejs", "vue.js"),
    "angular": ("angularjs", "angular.js"),
    "python": ("py",),
    "c++": ("cpp", "cplusplus"),
    "c#": ("csharp", "c sharp"),
    "postgresql": ("postgres", "psql"),
    "mongodb": ("mongo",),
    "kubernetes": ("k8s",),
    "aws": ("amazon web services",),
    "gcp": ("google cloud platform",),
    "ci/cd": ("continuous integration", "continuous deployment"),
    "ml": ("machine learning",),
    "ai": ("artificial intelligence",),
    "nlp": ("natural language processing",),
})


def normalize_keyword(keyword: str) -> str:
    """Lowercase, drop punctuation other than ``+#.`` and collapse whitespace."""
    text = _STRIP_RE.sub("", keyword.lower().strip())
    return _WHITESPACE_RE.sub(" ", text).strip()


def _contains_either_way(a: str, b: str) -> bool:
    return a in b or b in a


class KeywordMatcher:
    """Keyword matcher bound to an immutable alias table."""

    def __init__(self, aliases: Mapping[str, Iterable[str]] = DEFAULT_ALIASES) -> None:
        groups = []
        for canonical, alternatives in aliases.items():
            variants = {normalize_keyword(v) for v in (canonical, *alternatives)}
            variants.discard("")
            if variants:
                groups.append(frozenset(variants))
        self._alias_groups: tuple[frozenset[str], ...] = tuple(groups)

    def with_aliases(self, extra: Mapping[str, Iterable[str]]) -> "KeywordMatcher":
        """Return a new matcher whose alias table also includes ``extra``."""
        matcher = KeywordMatcher(extra)
        matcher._alias_groups = self._alias_groups + matcher._alias_groups
        return matcher

    def _same_alias_group(self, a: str, b: str) -> bool:
        for variants in self._alias_groups:
            if any(_contains_either_way(a, v) for v in variants) and any(
                _contains_either_way(b, v) for v in variants
            ):
                return True
        return False

    def keywords_match(self, a: str, b: str) -> bool:
        """Whether two raw keywords denote the same skill. Commutative."""
        left = normalize_keyword(a)
        right = normalize_keyword(b)
        if not left or not right:
            return False
        if _contains_either_way(left, right):
            return True
        return self._same_alias_group(left, right)

    def languages_match(self, a: str, b: str) -> bool:
        """Looser comparison for spoken-language names: no alias table."""
        left = normalize_keyword(a)
        right = normalize_keyword(b)
        if not left or not right:
            return False
        return _contains_either_way(left, right)

    def find_match(self, keyword: str, candidates: Iterable[str]) -> str | None:
        """Return the first candidate matching ``keyword``, if any."""
        for candidate in candidates:
            if self.keywords_match(candidate, keyword):
                return candidate
        return None


default_matcher = KeywordMatcher()


def keywords_match(a: str, b: str) -> bool:
    return default_matcher.keywords_match(a, b)


def languages_match(a: str, b: str) -> bool:
    return default_matcher.languages_match(a, b)
