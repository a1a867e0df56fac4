"""Types for reference catalogs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

FlatCategory = Literal["country", "variety", "process", "roast_level"]
HierarchicalCategory = Literal["region", "farm"]
Category = Literal["country", "variety", "process", "roast_level", "region", "farm"]

FLAT_CATEGORIES: tuple[str, ...] = ("country", "variety", "process", "roast_level")
HIERARCHICAL_CATEGORIES: tuple[str, ...] = ("region", "farm")


@dataclass(frozen=True)
class Entity:
    id: str
    name: str
    english_name: str
    aliases: tuple[str, ...]
