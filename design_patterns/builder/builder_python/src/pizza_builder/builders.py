import logging
from abc import ABC, abstractmethod
from typing import Any

from pizza_builder.errors import ValidationError
from pizza_builder.product import Pizza


logger = logging.getLogger(__name__)


class Builder(ABC):
    """Step-by-step construction of a pizza-shaped result.

    Every configuration call mutates the in-progress pizza and returns the
    builder itself, so calls can be chained. ``build()`` is the only call that
    validates; on success it hands the result to the caller and starts over
    with an empty pizza.

    A builder holds exactly one in-progress pizza and is not safe to share
    between threads. Use ``PerThreadBuilder`` for concurrent callers.
    """

    def __init__(self):
        self.reset()

    def reset(self) -> "Builder":
        logger.debug("%s: reset", type(self).__name__)
        self._pizza = Pizza()
        return self

    def set_size(self, size: str) -> "Builder":
        logger.debug("%s: size=%s", type(self).__name__, size)
        self._pizza.size = size
        return self

    def set_crust(self, crust: str) -> "Builder":
        logger.debug("%s: crust=%s", type(self).__name__, crust)
        self._pizza.crust = crust
        return self

    def add_cheese(self) -> "Builder":
        logger.debug("%s: cheese", type(self).__name__)
        self._pizza.has_cheese = True
        return self

    def add_topping(self, name: str) -> "Builder":
        logger.debug("%s: topping %s", type(self).__name__, name)
        self._pizza.toppings.append(name)
        return self

    def add_extra(self, name: str) -> "Builder":
        logger.debug("%s: extra %s", type(self).__name__, name)
        self._pizza.extras.append(name)
        return self

    def build(self) -> Any:
        missing = self._pizza.missing_fields()
        if missing:
            logger.warning("%s: cannot build, missing %s", type(self).__name__, ", ".join(missing))
            raise ValidationError(missing)
        result = self._assemble(self._pizza)
        logger.info("%s: built %s", type(self).__name__, self._pizza)
        self.reset()
        return result

    @abstractmethod
    def _assemble(self, pizza: Pizza) -> Any:
        """Turn a validated pizza into this builder's result."""


# Builds Pizza product putting together provided information
class PizzaBuilder(Builder):

    def _assemble(self, pizza: Pizza) -> Pizza:
        return pizza
