from dataclasses import dataclass, field
from typing import List, Optional, Tuple


REQUIRED_FIELDS = ("size", "crust")


# Pizza product to be assembled by the builders
@dataclass
class Pizza:

    size: Optional[str] = None
    crust: Optional[str] = None
    has_cheese: bool = False
    toppings: List[str] = field(default_factory=list)
    extras: List[str] = field(default_factory=list)

    def missing_fields(self) -> Tuple[str, ...]:
        return tuple(name for name in REQUIRED_FIELDS if not getattr(self, name))

    def is_valid(self) -> bool:
        return not self.missing_fields()

    def __str__(self):
        return "Pizza size=%s, " \
               "crust=%s, " \
               "cheese=%s, " \
               "toppings=[%s], " \
               "extras=[%s]" \
               % (self.size, self.crust, self.has_cheese, ", ".join(self.toppings), ", ".join(self.extras))
