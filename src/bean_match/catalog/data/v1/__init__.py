"""Reference catalog v1."""

from bean_match.catalog.data.v1.countries import COUNTRIES
from bean_match.catalog.data.v1.farms import FARMS
from bean_match.catalog.data.v1.processes import PROCESSING_METHODS
from bean_match.catalog.data.v1.regions import REGIONS
from bean_match.catalog.data.v1.roast_levels import ROAST_LEVELS
from bean_match.catalog.data.v1.varieties import VARIETIES

__all__ = ["COUNTRIES", "VARIETIES", "PROCESSING_METHODS", "ROAST_LEVELS", "REGIONS", "FARMS"]
