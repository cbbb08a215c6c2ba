from pizza_builder.builders import Builder, PizzaBuilder
from pizza_builder.director import Director, PizzaType
from pizza_builder.errors import ConfigurationError, PizzaBuilderError, ValidationError
from pizza_builder.pricing import PriceList
from pizza_builder.product import Pizza
from pizza_builder.receipt import ReceiptBuilder
from pizza_builder.threads import PerThreadBuilder

__all__ = [
    "Builder",
    "ConfigurationError",
    "Director",
    "PerThreadBuilder",
    "Pizza",
    "PizzaBuilder",
    "PizzaBuilderError",
    "PizzaType",
    "PriceList",
    "ReceiptBuilder",
    "ValidationError",
]
