from typing import Any, Mapping, Optional, Union

from bikecatalog.domain.attr import BicycleConfig, BikeAttr, SparesRecord, parse_config
from bikecatalog.domain.bicycle import Bicycle
from bikecatalog.domain.variant import VARIANTS, BicycleVariant, Variant
from bikecatalog.errors import UnknownVariantError
from bikecatalog.logging import get_logger

logger = get_logger(__name__)

VariantLike = Union[Variant, str, BicycleVariant]


class BicycleCatalog:
    """Resolves bicycle configurations against per-variant defaults."""

    def __init__(self, variants: Optional[Mapping[Variant, BicycleVariant]] = None):
        self._variants: dict[Variant, BicycleVariant] = dict(VARIANTS if variants is None else variants)
        # style fallbacks resolve to the generic variant
        self._variants.setdefault(Variant.GENERIC, VARIANTS[Variant.GENERIC])

    def variants(self) -> list[Variant]:
        return list(self._variants)

    def spec_for(self, variant: VariantLike) -> BicycleVariant:
        if isinstance(variant, BicycleVariant):
            return variant
        if not isinstance(variant, (Variant, str)):
            raise UnknownVariantError(variant)
        tag = Variant.parse(variant)
        if tag not in self._variants:
            raise UnknownVariantError(variant)
        return self._variants[tag]

    def construct(self, variant: VariantLike, config: Optional[Mapping[Any, Optional[str]]] = None) -> Bicycle:
        """Resolve ``config`` for ``variant``.

        Shared attributes are resolved first (size, then chain and tire size
        falling back to the variant defaults), then the variant's local fields
        are copied from the config with an empty-string fallback. Missing keys
        are never an error.
        """
        spec = self.spec_for(variant)
        values = parse_config(config)
        defaulted = []

        chain = values.get(BikeAttr.CHAIN)
        if not chain:
            chain = spec.default_chain()
            defaulted.append(BikeAttr.CHAIN.value)

        tire_size = values.get(BikeAttr.TIRE_SIZE)
        if not tire_size:
            tire_size = spec.default_tire_size()
            defaulted.append(BikeAttr.TIRE_SIZE.value)

        bicycle = Bicycle(
            variant=spec.tag,
            size=values.get(BikeAttr.SIZE, ""),
            chain=chain,
            tire_size=tire_size,
            style=values.get(BikeAttr.STYLE, ""),
            local=tuple(spec.local_spares(values).items()),
        )
        logger.debug(
            "bicycle_resolved",
            uid=bicycle.uid,
            variant=spec.tag.value,
            defaulted=defaulted,
        )
        return bicycle

    def spares(self, bicycle: Bicycle) -> SparesRecord:
        return bicycle.spares()

    def from_style(self, config: Optional[Mapping[Any, Optional[str]]] = None) -> Bicycle:
        """Pick the variant from the config's ``style`` key, then construct.

        An absent or unrecognized style gives a generic bicycle.
        """
        values = parse_config(config)
        return self.construct(self._variant_for_style(values), values)

    def _variant_for_style(self, values: BicycleConfig) -> Variant:
        style = values.get(BikeAttr.STYLE, "")
        if not style:
            return Variant.GENERIC
        variant = Variant.lookup(style)
        if variant is None or variant not in self._variants:
            logger.warning("unknown_style", style=style)
            return Variant.GENERIC
        return variant
