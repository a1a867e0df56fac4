"""Reference catalog loading and lookup."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import lru_cache
from importlib import import_module
from types import MappingProxyType

from bean_match.catalog.types import FLAT_CATEGORIES, HIERARCHICAL_CATEGORIES, Entity
from bean_match.exceptions import CatalogError, UnknownCategoryError

logger = logging.getLogger(__name__)

_FLAT_FIELDS = {
    "country": "countries",
    "variety": "varieties",
    "process": "processing_methods",
    "roast_level": "roast_levels",
}
_HIERARCHICAL_FIELDS = {
    "region": "regions",
    "farm": "farms",
}


@dataclass(frozen=True)
class Catalog:
    """Read-only reference data for one dictionary version.

    Flat categories hold Entity tuples. Regions are keyed by country id and
    farms by the exact region display name.
    """

    version: str
    countries: tuple[Entity, ...]
    varieties: tuple[Entity, ...]
    processing_methods: tuple[Entity, ...]
    roast_levels: tuple[Entity, ...]
    regions: Mapping[str, tuple[str, ...]]
    farms: Mapping[str, tuple[str, ...]]

    def __post_init__(self) -> None:
        for field_name in _FLAT_FIELDS.values():
            object.__setattr__(self, field_name, tuple(getattr(self, field_name)))
        for field_name in _HIERARCHICAL_FIELDS.values():
            object.__setattr__(self, field_name, _freeze_mapping(getattr(self, field_name)))

    @classmethod
    def build(
        cls,
        *,
        version: str = "custom",
        countries: Iterable[dict] = (),
        varieties: Iterable[dict] = (),
        processing_methods: Iterable[dict] = (),
        roast_levels: Iterable[dict] = (),
        regions: Mapping[str, Iterable[str]] | None = None,
        farms: Mapping[str, Iterable[str]] | None = None,
    ) -> Catalog:
        """Build a catalog from plain dicts, e.g. a data module or a test fixture."""
        return cls(
            version=version,
            countries=_build_entities(countries),
            varieties=_build_entities(varieties),
            processing_methods=_build_entities(processing_methods),
            roast_levels=_build_entities(roast_levels),
            regions=regions or {},
            farms=farms or {},
        )

    def entities(self, category: str) -> tuple[Entity, ...]:
        field_name = _FLAT_FIELDS.get(category)
        if field_name is None:
            raise UnknownCategoryError(
                f"Unknown flat category: {category!r} (expected one of {', '.join(FLAT_CATEGORIES)})"
            )
        return getattr(self, field_name)

    def options(self, category: str) -> list[Entity]:
        """Entities of a flat category in display order."""
        return list(self.entities(category))

    def hierarchy(self, category: str) -> Mapping[str, tuple[str, ...]]:
        field_name = _HIERARCHICAL_FIELDS.get(category)
        if field_name is None:
            raise UnknownCategoryError(
                f"Unknown hierarchical category: {category!r} "
                f"(expected one of {', '.join(HIERARCHICAL_CATEGORIES)})"
            )
        return getattr(self, field_name)

    def has_scope(self, category: str, scope_key: str) -> bool:
        return scope_key in self.hierarchy(category)

    def children(self, category: str, scope_key: str | None = None) -> tuple[str, ...]:
        """Children of ``scope_key``, or every child when no key is given.

        An unknown key yields an empty tuple.
        """
        mapping = self.hierarchy(category)
        if scope_key is None:
            return tuple(child for values in mapping.values() for child in values)
        return mapping.get(scope_key, ())


@lru_cache(maxsize=None)
def load_catalog(version: str = "v1") -> Catalog:
    """Load the packaged catalog for ``version``."""
    try:
        module = import_module(f"bean_match.catalog.data.{version}")
    except ModuleNotFoundError as e:
        raise CatalogError(f"Catalog version not found: {version}") from e

    try:
        catalog = Catalog.build(
            version=version,
            countries=module.COUNTRIES,
            varieties=module.VARIETIES,
            processing_methods=module.PROCESSING_METHODS,
            roast_levels=module.ROAST_LEVELS,
            regions=module.REGIONS,
            farms=module.FARMS,
        )
    except (AttributeError, KeyError, TypeError) as e:
        raise CatalogError(f"Malformed catalog data for version {version}: {e}") from e

    logger.debug(
        "Loaded catalog %s: %d countries, %d varieties, %d processes, %d roast levels",
        version,
        len(catalog.countries),
        len(catalog.varieties),
        len(catalog.processing_methods),
        len(catalog.roast_levels),
    )
    return catalog


def _build_entities(items: Iterable[dict]) -> tuple[Entity, ...]:
    return tuple(
        Entity(
            id=item["id"],
            name=item["name"],
            english_name=item["english_name"],
            aliases=tuple(item["aliases"]),
        )
        for item in items
    )


def _freeze_mapping(mapping: Mapping[str, Iterable[str]]) -> Mapping[str, tuple[str, ...]]:
    return MappingProxyType({key: tuple(values) for key, values in mapping.items()})
