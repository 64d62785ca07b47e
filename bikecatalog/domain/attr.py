from enum import Enum
from typing import Any, Mapping, Optional

from bikecatalog.errors import UnknownAttributeError

# separators ignored when matching attribute and variant names
NAME_SEPARATORS = ("_", "-", " ")


def normalize_name(name: str) -> str:
    normalized = name.strip().lower()
    for separator in NAME_SEPARATORS:
        normalized = normalized.replace(separator, "")
    return normalized


class BikeAttr(Enum):
    SIZE = "size"
    CHAIN = "chain"
    TIRE_SIZE = "tireSize"
    STYLE = "style"
    TAPE_COLOR = "tapeColor"
    FRONT_SHOCK = "frontShock"
    REAR_SHOCK = "rearShock"
    FLAG = "flag"

    @classmethod
    def parse(cls, key: Any) -> "BikeAttr":
        """Accept a member or its name in camelCase, snake_case or UPPER_CASE."""
        if isinstance(key, cls):
            return key
        if isinstance(key, str):
            normalized = normalize_name(key)
            for attr in cls:
                if attr.value.lower() == normalized:
                    return attr
        raise UnknownAttributeError(key)


BicycleConfig = Mapping[BikeAttr, str]
SparesRecord = dict[BikeAttr, str]


def parse_config(config: Optional[Mapping[Any, Optional[str]]]) -> dict[BikeAttr, str]:
    """Normalize keys to BikeAttr and drop None values, which count as absent."""
    if not config:
        return {}
    return {
        BikeAttr.parse(key): value
        for key, value in config.items()
        if value is not None
    }
