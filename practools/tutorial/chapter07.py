"""A ramen shop cash register that totals purchases and prints a receipt."""

from __future__ import annotations

from dataclasses import dataclass, field

SHOP_NAME = "ラーメン道 楽酢"
_RULE_WIDTH = 20


@dataclass(frozen=True)
class Item:
    """A menu item and its price."""

    name: str
    price: int


@dataclass
class Casher:
    """Running totals per item name and for the whole purchase."""

    items: dict[str, int] = field(default_factory=dict)
    total_price: int = 0

    def purchase(self, item: Item) -> None:
        """Add one ``item`` to the bill."""
        self.items[item.name] = self.items.get(item.name, 0) + item.price
        self.total_price += item.price

    def item_names(self) -> list[str]:
        """Names of the purchased items in ascending order."""
        return sorted(self.items)

    def receipt(self) -> str:
        """The receipt: shop name, one line per item, a rule and the total."""
        details = "".join(
            f"{name:<10}: {self.items[name]!s:>8}\n" for name in self.item_names()
        )
        rule = "-" * _RULE_WIDTH
        return f"\n{SHOP_NAME}\n\n{details}{rule}\n{self.total_price!s:>{_RULE_WIDTH}}\n"