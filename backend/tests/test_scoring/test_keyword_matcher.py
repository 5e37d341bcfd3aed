"""Tests for keyword normalization and fuzzy matching."""

import pytest

from services.scoring.keyword_matcher import (
    DEFAULT_ALIASES,
    KeywordMatcher,
    keywords_match,
    languages_match,
    normalize_keyword,
)


class TestNormalizeKeyword:
    def test_lowercase_and_trim(self):
        assert normalize_keyword("  React  ") == "react"

    def test_keeps_tech_punctuation(self):
        assert normalize_keyword("C#") == "c#"
        assert normalize_keyword("C++") == "c++"
        assert normalize_keyword("Node.js") == "node.js"

    def test_strips_other_punctuation(self):
        assert normalize_keyword("React!") == "react"
        assert normalize_keyword("CI/CD") == "cicd"

    def test_collapses_whitespace(self):
        assert normalize_keyword("machine \t  learning") == "machine learning"

    def test_only_punctuation_is_empty(self):
        assert normalize_keyword("!!!") == ""


class TestKeywordsMatch:
    def test_case_insensitive_equality(self):
        assert keywords_match("react", "React")

    def test_substring(self):
        assert keywords_match("React Native", "react")
        assert keywords_match("Postgres", "PostgreSQL")

    @pytest.mark.parametrize(
        "cv, jd",
        [
            ("JS", "JavaScript"),
            ("ES6", "JavaScript"),
            ("k8s", "Kubernetes"),
            ("psql", "PostgreSQL"),
            ("Amazon Web Services", "AWS"),
            ("ML", "Machine Learning"),
            ("nodejs", "Node"),
            ("csharp", "C#"),
            ("cpp", "C++"),
            ("Google Cloud Platform", "GCP"),
        ],
    )
    def test_aliases(self, cv, jd):
        assert keywords_match(cv, jd)

    def test_unrelated(self):
        assert not keywords_match("Docker", "Excel")
        assert not keywords_match("Java", "Python")

    def test_empty_never_matches(self):
        assert not keywords_match("", "python")
        assert not keywords_match("python", "")
        assert not keywords_match("", "")
        assert not keywords_match("!!!", "python")

    @pytest.mark.parametrize(
        "a, b",
        [
            ("JS", "JavaScript"),
            ("Docker", "Excel"),
            ("react", "React Native"),
            ("k8s", "Kubernetes"),
            ("", "python"),
            ("C#", "csharp"),
            ("Java", "Python"),
            ("NLP", "natural language processing"),
        ],
    )
    def test_commutative(self, a, b):
        assert keywords_match(a, b) == keywords_match(b, a)


class TestLanguagesMatch:
    def test_equal(self):
        assert languages_match("English", "english")

    def test_substring_either_direction(self):
        assert languages_match("English (native)", "English")
        assert languages_match("English", "English (C1)")

    def test_different(self):
        assert not languages_match("German", "English")

    def test_no_alias_table(self):
        matcher = KeywordMatcher({"german": ("deutsch",)})
        assert not matcher.languages_match("Deutsch", "German")

    def test_empty(self):
        assert not languages_match("", "English")


class TestInjectedAliases:
    def test_default_table_is_immutable(self):
        with pytest.raises(TypeError):
            DEFAULT_ALIASES["terraform"] = ("tf",)

    def test_empty_table_disables_aliases(self):
        matcher = KeywordMatcher({})
        assert not matcher.keywords_match("k8s", "Kubernetes")
        assert matcher.keywords_match("react", "React.js")

    def test_with_aliases_extends_without_touching_default(self):
        matcher = KeywordMatcher().with_aliases({"terraform": ("tf",)})
        assert matcher.keywords_match("TF", "Terraform")
        assert matcher.keywords_match("k8s", "Kubernetes")
        assert not keywords_match("TF", "Terraform")

    def test_alias_entries_are_normalized(self):
        matcher = KeywordMatcher({"ci/cd": ("continuous integration",)})
        assert matcher.keywords_match("CI/CD", "Continuous Integration")

    def test_find_match_returns_first_candidate(self):
        matcher = KeywordMatcher()
        assert matcher.find_match("JavaScript", ["Python", "js", "JS"]) == "js"
        assert matcher.find_match("Rust", ["Excel"]) is None
