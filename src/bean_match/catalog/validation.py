"""Consistency checks for reference catalogs.

Checks:
1. Entity ids are unique within a category.
2. Every entity lists its id, name and English name among its aliases.
3. No alias is blank, and no normalized alias is claimed by two entities.
4. Region keys are country ids and farm keys are region names.
"""

from __future__ import annotations

from bean_match.catalog.repository import Catalog
from bean_match.catalog.types import FLAT_CATEGORIES


def validate_catalog(catalog: Catalog) -> list[str]:
    """Return a list of human-readable problems; empty when the catalog is clean."""
    problems: list[str] = []
    for category in FLAT_CATEGORIES:
        problems.extend(_validate_entities(category, catalog))
    problems.extend(_validate_hierarchy(catalog))
    return problems


def _validate_entities(category: str, catalog: Catalog) -> list[str]:
    problems: list[str] = []
    seen_ids: set[str] = set()
    alias_owner: dict[str, str] = {}

    for entity in catalog.entities(category):
        if entity.id in seen_ids:
            problems.append(f"{category}: duplicate id {entity.id!r}")
        seen_ids.add(entity.id)

        normalized_aliases = {_normalize(alias) for alias in entity.aliases}
        for required in (entity.id, entity.name, entity.english_name):
            if _normalize(required) not in normalized_aliases:
                problems.append(f"{category}/{entity.id}: aliases missing {required!r}")

        for alias in entity.aliases:
            normalized = _normalize(alias)
            if not normalized:
                problems.append(f"{category}/{entity.id}: blank alias")
                continue
            owner = alias_owner.setdefault(normalized, entity.id)
            if owner != entity.id:
                problems.append(
                    f"{category}: alias {alias!r} claimed by both {owner!r} and {entity.id!r}"
                )

    return problems


def _validate_hierarchy(catalog: Catalog) -> list[str]:
    problems: list[str] = []
    country_ids = {entity.id for entity in catalog.countries}
    for country_id in catalog.regions:
        if country_id not in country_ids:
            problems.append(f"region: scope {country_id!r} is not a country id")

    region_names = set(catalog.children("region"))
    for region_name in catalog.farms:
        if region_name not in region_names:
            problems.append(f"farm: scope {region_name!r} is not a region name")

    return problems


def _normalize(value: str) -> str:
    return value.strip().casefold()
