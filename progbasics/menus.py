"""Console menus whose buttons carry their own behaviour and context."""

from __future__ import annotations

import argparse
import copy
import sys
from collections.abc import Callable, Iterable, Iterator, MutableSequence, Sequence
from dataclasses import dataclass, field
from typing import Any, TextIO

from progbasics.item_ops import SumProduct, for_each_item


class Console:
    """Whitespace-separated input tokens paired with an output stream."""

    def __init__(self, lines: Iterable[str], output: TextIO) -> None:
        self._tokens: Iterator[str] = (token for line in lines for token in line.split())
        self.output = output

    def read_token(self) -> str:
        """The next input token; raises EOFError when the input is exhausted."""
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError("no more input") from None

    def write(self, text: str) -> None:
        self.output.write(text)


@dataclass
class Button:
    """A named action offered in a menu."""

    name: str
    action: Callable[[], None]


@dataclass
class ComputedState:
    """Two numbers updated by the state menu."""

    a: float = 0.0
    b: float = 0.0

    def recompute(self) -> None:
        """Double ``a`` and add one to ``b``."""
        self.a *= 2.0
        self.b += 1.0

    def reset(self) -> None:
        """Set both numbers back to zero."""
        self.a = 0.0
        self.b = 0.0


def _fmt(value: float) -> str:
    return f"{value:g}"


def _read_float(console: Console, prompt: str) -> float:
    while True:
        console.write(prompt)
        try:
            return float(console.read_token())
        except ValueError:
            continue


def text_options(console: Console) -> list[Button]:
    """Buttons that print a greeting."""

    def print_hello() -> None:
        console.write("Hello!\n")

    def greet_user() -> None:
        console.write("Enter your name: ")
        name = console.read_token()
        console.write(f"Hello, {name}!\n")

    return [
        Button('print "Hello"', print_hello),
        Button("greet the user", greet_user),
    ]


def calculator_options(console: Console) -> list[Button]:
    """Buttons that read two numbers and add or subtract them."""

    def read_two() -> tuple[float, float]:
        return _read_float(console, "Enter a: "), _read_float(console, "Enter b: ")

    def add_two() -> None:
        a, b = read_two()
        console.write(f"{_fmt(a)} + {_fmt(b)} = {_fmt(a + b)}\n")

    def subtract_two() -> None:
        a, b = read_two()
        console.write(f"{_fmt(a)} - {_fmt(b)} = {_fmt(a - b)}\n")

    return [
        Button("add two values", add_two),
        Button("subtract two values", subtract_two),
    ]


def select_option(options: Sequence[Button], console: Console) -> Button:
    """Ask until a valid option number is entered and return that option.

    Raises EOFError if the input ends first.
    """
    listing = "".join(f"{index} - {option.name}, " for index, option in enumerate(options))
    while True:
        console.write(f"Select a function to be executed ({listing}): ")
        try:
            choice = int(console.read_token())
        except ValueError:
            continue
        if 0 <= choice < len(options):
            return options[choice]


def _adder(console: Console, target: Any, attribute: str) -> Callable[[], None]:
    def add() -> None:
        amount = _read_float(console, "Enter a number to add to the value:")
        setattr(target, attribute, getattr(target, attribute) + amount)

    return add


def state_buttons(state: ComputedState, other: Any, console: Console) -> list[Button]:
    """Buttons acting on ``state``, on ``other.value`` and on nothing at all."""

    def print_state() -> None:
        console.write(f"a: {_fmt(state.a)}\nb: {_fmt(state.b)}\n")

    def print_hello() -> None:
        console.write("Hello!\n")

    return [
        Button("Recompute", state.recompute),
        Button("Reset", state.reset),
        Button("Print", print_state),
        Button("Add to a", _adder(console, state, "a")),
        Button("Add to b", _adder(console, state, "b")),
        Button("Add to other number", _adder(console, other, "value")),
        Button("Print hello", print_hello),
    ]


def item_buttons(
    items: MutableSequence[float], result: SumProduct, console: Console
) -> list[Button]:
    """Buttons that transform ``items`` or accumulate into ``result``."""

    def add_current_sum() -> None:
        for_each_item(items, lambda value: value + result.sum)

    def print_items() -> None:
        for_each_item(items, lambda value: console.write(f"{_fmt(value)}, "))

    def compute() -> None:
        for_each_item(items, result)

    def print_result() -> None:
        console.write(f"{_fmt(result.sum)}, {_fmt(result.product)}\n")

    def reset_items() -> None:
        for_each_item(items, lambda _value: _read_float(console, "Enter new value: "))

    return [
        Button("Add current sum to all items", add_current_sum),
        Button("Print all items", print_items),
        Button("Compute sum and product", compute),
        Button("Print computed sum and product", print_result),
        Button("Reset items", reset_items),
    ]


def run_menu(buttons: Sequence[Button], console: Console) -> None:
    """Run chosen buttons until an out-of-range choice or the end of input."""
    try:
        while True:
            console.write("Choose a function: \n")
            for index, button in enumerate(buttons):
                console.write(f"{index}: {button.name}\n")
            try:
                choice = int(console.read_token())
            except ValueError:
                continue
            if not 0 <= choice < len(buttons):
                return
            buttons[choice].action()
            console.write("\n")
    except EOFError:
        return


@dataclass
class _CopiedCapture:
    a: int
    b: float
    nums: list[int] = field(default_factory=list)

    def __call__(self) -> float:
        self.nums[0] = 2
        self.a += 2
        self.b *= 2
        return self.a + self.b


def _closure_demo(out: TextIO) -> None:
    nums = [1, 2]
    functor = _CopiedCapture(nums[0], 10.0, list(nums))
    functor_copy = copy.deepcopy(functor)
    out.write(f"{nums[0]}\n")
    for _ in range(3):
        out.write(f"{_fmt(functor())}\n")
    out.write(f"{nums[0]}\n")
    out.write(f"{_fmt(functor_copy())}\n")

    context = ComputedState()

    def increase() -> None:
        context.a += 1
        context.b *= 2

    def reset() -> None:
        context.a = 0
        context.b = 1

    def show() -> None:
        out.write(f"{_fmt(context.a)}, {_fmt(context.b)}\n")

    show()
    reset()
    show()
    increase()
    show()
    increase()
    show()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="menus", description="Pick actions from console menus."
    )
    parser.add_argument(
        "program",
        nargs="?",
        default="functions",
        choices=["functions", "state", "items", "closures"],
    )
    args = parser.parse_args(argv)
    console = Console(sys.stdin, sys.stdout)

    if args.program == "functions":
        try:
            option = select_option(text_options(console) + calculator_options(console), console)
            option.action()
        except EOFError:
            console.write("\n")
            return 1
    elif args.program == "state":
        holder = argparse.Namespace(value=0.0)
        run_menu(state_buttons(ComputedState(), holder, console), console)
    elif args.program == "items":
        run_menu(item_buttons([1.0, 2.0, 3.0, 4.0], SumProduct(), console), console)
    else:
        _closure_demo(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())