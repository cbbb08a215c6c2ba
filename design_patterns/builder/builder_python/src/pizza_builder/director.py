import logging
from enum import Enum
from typing import Any, Optional

from pizza_builder.builders import Builder, PizzaBuilder
from pizza_builder.errors import ConfigurationError
from pizza_builder.pricing import PriceList


logger = logging.getLogger(__name__)


class PizzaType(Enum):
    MARGHERITA = 1
    PEPPERONI = 2
    VEGGIE = 3


# Replays a fixed sequence of calls against whatever builder it is given.
# The concrete builder decides what comes out (e.g. Pizza or receipt).
class Director:

    def __init__(self, price_list: Optional[PriceList] = None):
        self.price_list = price_list

    def construct(self, pizza_type: PizzaType, builder: Builder) -> Any:
        logger.debug("Constructing %s with %s", pizza_type.name, type(builder).__name__)
        recipe = {
            PizzaType.MARGHERITA: self.make_margherita,
            PizzaType.PEPPERONI: self.make_pepperoni,
            PizzaType.VEGGIE: self.make_veggie,
        }[pizza_type]
        return recipe(builder)

    def make_margherita(self, builder: Builder) -> Any:
        return builder.reset() \
            .set_size("Medium") \
            .set_crust("Thin") \
            .add_cheese() \
            .add_topping("Tomato") \
            .add_topping("Basil") \
            .build()

    def make_pepperoni(self, builder: Builder) -> Any:
        return builder.reset() \
            .set_size("Large") \
            .set_crust("Deep Dish") \
            .add_cheese() \
            .add_topping("Pepperoni") \
            .add_extra("Chili Flakes") \
            .build()

    def make_veggie(self, builder: Builder) -> Any:
        return builder.reset() \
            .set_size("Small") \
            .set_crust("Whole Wheat") \
            .add_topping("Mushrooms") \
            .add_topping("Peppers") \
            .add_topping("Olives") \
            .add_extra("Garlic Dip") \
            .build()

    def quote(self, pizza_type: PizzaType) -> float:
        if self.price_list is None:
            raise ConfigurationError("Director has no price list to quote %s" % pizza_type.name)
        return self.price_list.price(self.construct(pizza_type, PizzaBuilder()))
