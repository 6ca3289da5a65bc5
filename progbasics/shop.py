"""A console shop where a customer picks items from a numbered list."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import TextIO


@dataclass(frozen=True)
class Item:
    """A product on sale."""

    price: int
    title: str
    brand: str


@dataclass
class Customer:
    """A shopper's budget and how many of each item they have bought."""

    money_left: int
    bought: list[int] = field(default_factory=list)


DEFAULT_ITEMS: tuple[Item, ...] = (
    Item(price=50, title="Retail Sneakers", brand="Nike"),
    Item(price=20, title="Blue blouse", brand="Sample1"),
    Item(price=10, title="Unisex Hat", brand="Lucoil"),
)


def format_items(items: Sequence[Item]) -> str:
    """The numbered item list, starting at 1, one item per line."""
    return "".join(
        f"{number}. {item.title} from {item.brand} for {item.price}\n"
        for number, item in enumerate(items, start=1)
    )


def try_buy(customer: Customer, items: Sequence[Item], index: int) -> bool:
    """Record one purchase of ``items[index]`` if the customer can afford it.

    Only affordability is checked; the customer's money is not reduced.
    """
    if not 0 <= index < len(items):
        raise IndexError(f"item index {index} out of range")
    if customer.money_left < items[index].price:
        return False
    customer.bought[index] += 1
    return True


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def process_customer(
    items: Sequence[Item], customer: Customer, lines: Iterable[str], output: TextIO
) -> None:
    """Serve the customer until they choose 0, then list what was bought.

    Input that ends or is not a number finishes shopping as 0 does.
    """
    if len(customer.bought) < len(items):
        customer.bought.extend([0] * (len(items) - len(customer.bought)))

    tokens = _tokens(lines)
    while True:
        output.write(format_items(items))
        output.write(f"You have {customer.money_left} money left\n")
        output.write("Enter the number of the item to buy, or 0 to exit: \n")

        try:
            choice = int(next(tokens))
        except (StopIteration, ValueError):
            break
        if choice == 0:
            break

        index = choice - 1
        if not 0 <= index < len(items):
            output.write("Invalid option.\n")
            continue

        if try_buy(customer, items, index):
            output.write(f"{items[index].title} has been added")
        else:
            output.write("Not enough money\n")

    output.write("You have bought: \n")
    for item, count in zip(items, customer.bought):
        if count > 0:
            output.write(f"{count} of {item.title} from {item.brand}\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="shop", description="Buy items from a small shop by number."
    )
    parser.parse_args(argv)
    customer = Customer(money_left=100, bought=[0] * len(DEFAULT_ITEMS))
    process_customer(DEFAULT_ITEMS, customer, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())