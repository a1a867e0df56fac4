"""Fuzzy matcher for coffee attributes."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache

from bean_match.catalog.repository import Catalog, load_catalog
from bean_match.catalog.types import Entity
from bean_match.schema import CoffeeDataInput, CoffeeDataSuggestions, MatchResult
from bean_match.similarity import similarity

logger = logging.getLogger(__name__)

DEFAULT_MIN_CONFIDENCE = 70
SCOPE_MODES = ("strict", "legacy")

_SLUG_PATTERN = re.compile(r"[\W_]+")


def _safe_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _safe_confidence(value: str | None, default: int) -> int:
    confidence = _safe_int(value, default)
    if not 0 <= confidence <= 100:
        return default
    return confidence


@dataclass(frozen=True)
class MatcherConfig:
    catalog_version: str = "v1"
    min_confidence: int = DEFAULT_MIN_CONFIDENCE
    scope_mode: str = "strict"  # strict|legacy

    @classmethod
    def from_env(cls) -> "MatcherConfig":
        scope_mode = os.getenv("BEAN_MATCH_SCOPE_MODE", "strict").strip().lower()
        return cls(
            catalog_version=os.getenv("BEAN_MATCH_CATALOG_VERSION", "v1").strip() or "v1",
            min_confidence=_safe_confidence(os.getenv("BEAN_MATCH_MIN_CONFIDENCE"), DEFAULT_MIN_CONFIDENCE),
            scope_mode=scope_mode if scope_mode in SCOPE_MODES else "strict",
        )


class CoffeeDataMatcher:
    """Matches free text against a reference catalog.

    Flat categories (country, variety, process, roast_level) are matched
    through each entity's aliases. Hierarchical categories (region, farm) are
    matched directly against display names, optionally narrowed to one parent
    scope: regions by country id, farms by region name.
    """

    def __init__(self, config: MatcherConfig | None = None, *, catalog: Catalog | None = None):
        self.config = config or MatcherConfig()
        self.catalog = catalog or load_catalog(self.config.catalog_version)

    def match_flat(self, category: str, raw: str | None) -> MatchResult | None:
        entities = self.catalog.entities(category)
        if not raw or not raw.strip():
            return None

        best_entity: Entity | None = None
        highest_confidence = 0
        for entity in entities:
            for alias in entity.aliases:
                confidence = similarity(raw, alias)
                if confidence > highest_confidence and confidence >= self.config.min_confidence:
                    highest_confidence = confidence
                    best_entity = entity

        if best_entity is None:
            logger.debug("No %s match for %r", category, raw)
            return None

        logger.debug("Matched %s %r -> %s (%d)", category, raw, best_entity.id, highest_confidence)
        return MatchResult(
            id=best_entity.id,
            name=best_entity.name,
            english_name=best_entity.english_name,
            confidence=highest_confidence,
        )

    def match_hierarchical(
        self,
        category: str,
        raw: str | None,
        scope_key: str | None = None,
    ) -> MatchResult | None:
        candidates = self._resolve_candidates(category, scope_key)
        if not raw or not raw.strip():
            return None

        best_candidate: str | None = None
        highest_confidence = 0
        for candidate in candidates:
            confidence = similarity(raw, candidate)
            if confidence > highest_confidence and confidence >= self.config.min_confidence:
                highest_confidence = confidence
                best_candidate = candidate

        if best_candidate is None:
            logger.debug("No %s match for %r (scope=%r)", category, raw, scope_key)
            return None

        logger.debug(
            "Matched %s %r -> %s (%d, scope=%r)",
            category,
            raw,
            best_candidate,
            highest_confidence,
            scope_key,
        )
        return MatchResult(
            id=slugify(best_candidate),
            name=best_candidate,
            english_name=best_candidate,
            confidence=highest_confidence,
        )

    def match_country(self, raw: str | None) -> MatchResult | None:
        return self.match_flat("country", raw)

    def match_variety(self, raw: str | None) -> MatchResult | None:
        return self.match_flat("variety", raw)

    def match_processing_method(self, raw: str | None) -> MatchResult | None:
        return self.match_flat("process", raw)

    def match_roasting_level(self, raw: str | None) -> MatchResult | None:
        return self.match_flat("roast_level", raw)

    def match_region(self, raw: str | None, country_id: str | None = None) -> MatchResult | None:
        return self.match_hierarchical("region", raw, country_id)

    def match_farm(self, raw: str | None, region_name: str | None = None) -> MatchResult | None:
        """Match a farm name.

        ``region_name`` must be the region's display name exactly as it
        appears in the catalog (e.g. ``MatchResult.name`` of a region match),
        not its slug id.
        """
        return self.match_hierarchical("farm", raw, region_name)

    def match_coffee_data(self, data: CoffeeDataInput) -> CoffeeDataSuggestions:
        """Match every supplied field, scoping region by country and farm by region."""
        suggestions = CoffeeDataSuggestions()

        if data.country:
            suggestions.country = self.match_country(data.country)

        if data.region:
            country_id = suggestions.country.id if suggestions.country else None
            suggestions.region = self.match_region(data.region, country_id)

        if data.farm:
            region_name = suggestions.region.name if suggestions.region else None
            suggestions.farm = self.match_farm(data.farm, region_name)

        if data.variety:
            suggestions.variety = self.match_variety(data.variety)

        if data.process:
            suggestions.process = self.match_processing_method(data.process)

        if data.roast_level:
            suggestions.roast_level = self.match_roasting_level(data.roast_level)

        return suggestions

    def _resolve_candidates(self, category: str, scope_key: str | None) -> Iterable[str]:
        if not scope_key or not scope_key.strip():
            return self.catalog.children(category)
        if self.catalog.has_scope(category, scope_key):
            return self.catalog.children(category, scope_key)

        logger.debug("Unknown %s scope %r (mode=%s)", category, scope_key, self.config.scope_mode)
        if self.config.scope_mode == "legacy":
            return self.catalog.children(category)
        return ()


def slugify(value: str) -> str:
    """Lowercase ``value`` and collapse each run of non-alphanumerics into ``_``."""
    return _SLUG_PATTERN.sub("_", value.lower())


@lru_cache(maxsize=1)
def get_default_matcher() -> CoffeeDataMatcher:
    """Matcher built once from environment configuration."""
    return CoffeeDataMatcher(MatcherConfig.from_env())


def match_country(raw: str | None) -> MatchResult | None:
    return get_default_matcher().match_country(raw)


def match_variety(raw: str | None) -> MatchResult | None:
    return get_default_matcher().match_variety(raw)


def match_processing_method(raw: str | None) -> MatchResult | None:
    return get_default_matcher().match_processing_method(raw)


def match_roasting_level(raw: str | None) -> MatchResult | None:
    return get_default_matcher().match_roasting_level(raw)


def match_region(raw: str | None, country_id: str | None = None) -> MatchResult | None:
    return get_default_matcher().match_region(raw, country_id)


def match_farm(raw: str | None, region_name: str | None = None) -> MatchResult | None:
    return get_default_matcher().match_farm(raw, region_name)


def match_coffee_data(data: CoffeeDataInput) -> CoffeeDataSuggestions:
    """Match an extraction result using the default matcher."""
    return get_default_matcher().match_coffee_data(data)
