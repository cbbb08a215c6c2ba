from typing import List, Optional

from pizza_builder.builders import Builder
from pizza_builder.pricing import PriceList
from pizza_builder.product import Pizza


HEADER = "===== Pizza Receipt ====="
FOOTER = "========================="


# Builds a text receipt from the same calls PizzaBuilder accepts
class ReceiptBuilder(Builder):

    def __init__(self, price_list: Optional[PriceList] = None):
        self.price_list = price_list
        super().__init__()

    def _assemble(self, pizza: Pizza) -> str:
        lines = [
            HEADER,
            "Size: %s" % pizza.size,
            "Crust: %s" % pizza.crust,
            "Cheese: %s" % ("Yes" if pizza.has_cheese else "No"),
        ]
        lines += _block("Toppings", pizza.toppings)
        lines += _block("Extras", pizza.extras)
        if self.price_list is not None:
            lines.append("Total: %.2f" % self.price_list.price(pizza))
        lines.append(FOOTER)
        return "\n".join(lines)


def _block(title: str, items: List[str]) -> List[str]:
    if not items:
        return ["%s: None" % title]
    return ["%s:" % title] + ["  - %s" % item for item in items]
