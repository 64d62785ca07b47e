from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Protocol, runtime_checkable

from bikecatalog.domain.attr import BicycleConfig, BikeAttr, normalize_name
from bikecatalog.errors import UnknownVariantError

BASE_CHAIN = "10-speed"


class Variant(Enum):
    GENERIC = "generic"
    ROAD = "road"
    MOUNTAIN = "mountain"
    RECUMBENT = "recumbent"

    @classmethod
    def lookup(cls, tag: Any) -> Optional["Variant"]:
        """Match "road", "ROAD", "RoadBike" or "road_bike"; None when nothing matches."""
        if isinstance(tag, cls):
            return tag
        if not isinstance(tag, str):
            return None
        normalized = normalize_name(tag)
        if normalized in ("bike", "bicycle"):
            return cls.GENERIC
        for suffix in ("bicycle", "bike"):
            if normalized.endswith(suffix):
                normalized = normalized[: -len(suffix)]
                break
        for variant in cls:
            if variant.value == normalized:
                return variant
        return None

    @classmethod
    def parse(cls, tag: Any) -> "Variant":
        variant = cls.lookup(tag)
        if variant is None:
            raise UnknownVariantError(tag)
        return variant


@runtime_checkable
class BicycleVariant(Protocol):
    tag: Variant
    local_keys: tuple[BikeAttr, ...]

    def default_chain(self) -> str: ...

    def default_tire_size(self) -> str: ...

    def local_spares(self, config: BicycleConfig) -> dict[BikeAttr, str]: ...


@dataclass(frozen=True)
class VariantSpec:
    tag: Variant
    tire_size: str = ""
    chain: str = BASE_CHAIN
    local_keys: tuple[BikeAttr, ...] = ()

    def default_chain(self) -> str:
        return self.chain

    def default_tire_size(self) -> str:
        return self.tire_size

    def local_spares(self, config: BicycleConfig) -> dict[BikeAttr, str]:
        return {key: config.get(key) or "" for key in self.local_keys}


GENERIC_BIKE = VariantSpec(Variant.GENERIC)

ROAD_BIKE = VariantSpec(
    Variant.ROAD,
    tire_size="23",
    local_keys=(BikeAttr.TAPE_COLOR,),
)

MOUNTAIN_BIKE = VariantSpec(
    Variant.MOUNTAIN,
    tire_size="2.1",
    local_keys=(BikeAttr.FRONT_SHOCK, BikeAttr.REAR_SHOCK),
)

RECUMBENT_BIKE = VariantSpec(
    Variant.RECUMBENT,
    tire_size="28",
    chain="9-speed",
    local_keys=(BikeAttr.FLAG,),
)

VARIANTS: dict[Variant, BicycleVariant] = {
    spec.tag: spec for spec in (GENERIC_BIKE, ROAD_BIKE, MOUNTAIN_BIKE, RECUMBENT_BIKE)
}
