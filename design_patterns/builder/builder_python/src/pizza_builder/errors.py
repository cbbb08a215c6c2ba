from typing import Iterable


class PizzaBuilderError(Exception):
    pass


class ValidationError(PizzaBuilderError):
    """Raised by ``build()`` when a required field of the pizza is not set."""

    def __init__(self, missing: Iterable[str]):
        self.missing = tuple(missing)
        super().__init__("Pizza requires both size and crust type (missing: %s)" % ", ".join(self.missing))


class ConfigurationError(PizzaBuilderError):
    """Raised for an invalid price list or when a price is requested without one."""

    pass
