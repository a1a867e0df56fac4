"""bean-match: Fuzzy matching of coffee attributes against curated catalogs."""

from bean_match.formatting import confidence_level, format_match_result, needs_review
from bean_match.matcher import (
    CoffeeDataMatcher,
    MatcherConfig,
    match_coffee_data,
    match_country,
    match_farm,
    match_processing_method,
    match_region,
    match_roasting_level,
    match_variety,
)
from bean_match.schema import CoffeeDataInput, CoffeeDataSuggestions, MatchResult
from bean_match.similarity import similarity
from bean_match.suggestions import OriginSelection, filter_suggestions

__version__ = "0.1.0"

__all__ = [
    "CoffeeDataInput",
    "CoffeeDataMatcher",
    "CoffeeDataSuggestions",
    "MatchResult",
    "MatcherConfig",
    "OriginSelection",
    "confidence_level",
    "filter_suggestions",
    "format_match_result",
    "match_coffee_data",
    "match_country",
    "match_farm",
    "match_processing_method",
    "match_region",
    "match_roasting_level",
    "match_variety",
    "needs_review",
    "similarity",
    "__version__",
]
