from bikecatalog.domain.attr import BicycleConfig, BikeAttr, SparesRecord, parse_config
from bikecatalog.domain.bicycle import Bicycle, spares_as_dict
from bikecatalog.domain.entity import Entity
from bikecatalog.domain.variant import (
    BASE_CHAIN,
    VARIANTS,
    BicycleVariant,
    Variant,
    VariantSpec,
)

__all__ = [
    "BASE_CHAIN",
    "VARIANTS",
    "Bicycle",
    "BicycleConfig",
    "BicycleVariant",
    "BikeAttr",
    "Entity",
    "SparesRecord",
    "Variant",
    "VariantSpec",
    "parse_config",
    "spares_as_dict",
]
