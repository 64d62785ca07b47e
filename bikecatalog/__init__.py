"""Bicycle configuration catalog: per-variant defaults and spare parts."""

from bikecatalog.catalog import BicycleCatalog
from bikecatalog.domain import (
    Bicycle,
    BicycleConfig,
    BicycleVariant,
    BikeAttr,
    SparesRecord,
    Variant,
    VariantSpec,
    parse_config,
    spares_as_dict,
)
from bikecatalog.errors import CatalogError, UnknownAttributeError, UnknownVariantError

__version__ = "0.1.0"

__all__ = [
    "Bicycle",
    "BicycleCatalog",
    "BicycleConfig",
    "BicycleVariant",
    "BikeAttr",
    "CatalogError",
    "SparesRecord",
    "UnknownAttributeError",
    "UnknownVariantError",
    "Variant",
    "VariantSpec",
    "parse_config",
    "spares_as_dict",
]
