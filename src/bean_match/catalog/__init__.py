"""Reference catalogs for bean-match."""

from bean_match.catalog.repository import Catalog, load_catalog
from bean_match.catalog.types import Category, Entity, FlatCategory, HierarchicalCategory
from bean_match.catalog.validation import validate_catalog

__all__ = [
    "Catalog",
    "Category",
    "Entity",
    "FlatCategory",
    "HierarchicalCategory",
    "load_catalog",
    "validate_catalog",
]
