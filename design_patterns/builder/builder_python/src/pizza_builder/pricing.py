"""Prices for pizzas, injected into the receipt builder and the director."""
import logging
import math
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping

from pizza_builder.errors import ConfigurationError
from pizza_builder.product import Pizza


logger = logging.getLogger(__name__)


def _default_sizes() -> Dict[str, float]:
    return {"Small": 1.0, "Medium": 1.5, "Large": 2.0}


@dataclass
class PriceList:

    sizes: Dict[str, float] = field(default_factory=_default_sizes)
    default_size: float = 1.0
    cheese: float = 1.0
    topping: float = 1.0
    extra: float = 0.5

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "PriceList":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise ConfigurationError("Unknown price list keys: %s" % ", ".join(unknown))

        values = dict(mapping)
        try:
            if "sizes" in values:
                values["sizes"] = {str(size): float(price) for size, price in values["sizes"].items()}
            for name in ("default_size", "cheese", "topping", "extra"):
                if name in values:
                    values[name] = float(values[name])
        except (AttributeError, TypeError, ValueError) as error:
            raise ConfigurationError("Invalid price list: %s" % error) from error

        prices = list(values.get("sizes", {}).values())
        prices += [value for name, value in values.items() if name != "sizes"]
        if not all(math.isfinite(price) for price in prices):
            raise ConfigurationError("Prices must be finite numbers")
        if any(price < 0 for price in prices):
            raise ConfigurationError("Prices must not be negative")

        logger.debug("Loaded price list overriding %s", ", ".join(sorted(values)) or "nothing")
        return cls(**values)

    def price(self, pizza: Pizza) -> float:
        base_price = self.sizes.get(pizza.size, self.default_size)
        cheese_price = self.cheese if pizza.has_cheese else 0
        toppings_price = self.topping * len(pizza.toppings)
        extras_price = self.extra * len(pizza.extras)
        return base_price + cheese_price + toppings_price + extras_price
