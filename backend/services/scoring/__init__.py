"""Suitability scoring engine: weights, keyword matching, dimension scores."""

from services.scoring.calculator import calculate_suitability
from services.scoring.keyword_adapter import AdditionalScoringData, calculate_suitability_from_keywords
from services.scoring.keyword_matcher import KeywordMatcher, keywords_match, normalize_keyword
from services.scoring.weights import validate_weights

__all__ = [
    "AdditionalScoringData",
    "KeywordMatcher",
    "calculate_suitability",
    "calculate_suitability_from_keywords",
    "keywords_match",
    "normalize_keyword",
    "validate_weights",
]
