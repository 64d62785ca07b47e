from dataclasses import dataclass

from bikecatalog.domain.attr import BikeAttr, SparesRecord
from bikecatalog.domain.entity import Entity
from bikecatalog.domain.variant import Variant


@dataclass(frozen=True)
class Bicycle(Entity):
    """A resolved bicycle configuration.

    ``local`` holds the variant-specific fields (tape color, shocks, flag) as
    ordered pairs so the record stays hashable and immutable.
    """

    variant: Variant
    size: str = ""
    chain: str = ""
    tire_size: str = ""
    style: str = ""
    local: tuple[tuple[BikeAttr, str], ...] = ()

    def _local(self, attr: BikeAttr) -> str:
        return dict(self.local).get(attr, "")

    @property
    def tape_color(self) -> str:
        return self._local(BikeAttr.TAPE_COLOR)

    @property
    def front_shock(self) -> str:
        return self._local(BikeAttr.FRONT_SHOCK)

    @property
    def rear_shock(self) -> str:
        return self._local(BikeAttr.REAR_SHOCK)

    @property
    def flag(self) -> str:
        return self._local(BikeAttr.FLAG)

    def spares(self) -> SparesRecord:
        spares = {BikeAttr.TIRE_SIZE: self.tire_size, BikeAttr.CHAIN: self.chain}
        spares.update(self.local)
        return spares

    def as_dict(self) -> dict[str, str]:
        data = {
            "variant": self.variant.value,
            BikeAttr.SIZE.value: self.size,
            BikeAttr.CHAIN.value: self.chain,
            BikeAttr.TIRE_SIZE.value: self.tire_size,
            BikeAttr.STYLE.value: self.style,
        }
        data.update(spares_as_dict(dict(self.local)))
        return data


def spares_as_dict(record: SparesRecord) -> dict[str, str]:
    return {attr.value: value for attr, value in record.items()}
