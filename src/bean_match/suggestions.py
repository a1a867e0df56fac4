"""Suggestion lists and origin selection state for form consumers."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from bean_match.catalog.types import Entity


def filter_suggestions(entities: Iterable[Entity], text: str | None) -> list[Entity]:
    """Entities whose name or English name contains ``text``, case-insensitively."""
    items = list(entities)
    query = (text or "").strip().lower()
    if not query:
        return items
    return [
        item
        for item in items
        if query in item.name.lower() or query in item.english_name.lower()
    ]


class OriginSelection(BaseModel):
    """Country / region / farm chosen in a form.

    Changing a parent clears its dependents, so a farm never outlives the
    region it was matched under.
    """

    model_config = ConfigDict(frozen=True)

    country: str | None = None
    region: str | None = None
    farm: str | None = None

    def with_country(self, country: str | None) -> OriginSelection:
        if country == self.country:
            return self
        return OriginSelection(country=country)

    def with_region(self, region: str | None) -> OriginSelection:
        if region == self.region:
            return self
        return self.model_copy(update={"region": region, "farm": None})

    def with_farm(self, farm: str | None) -> OriginSelection:
        return self.model_copy(update={"farm": farm})

    def region_scope(self) -> str | None:
        """Scope key for region matching: the selected country id."""
        return self.country

    def farm_scope(self) -> str | None:
        """Scope key for farm matching: the selected region display name."""
        return self.region
