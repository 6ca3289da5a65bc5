"""Traffic light colours, their names and what a driver should do at each."""

from __future__ import annotations

import argparse
import sys
from enum import IntEnum


class TrafficLightColor(IntEnum):
    """The three colours of a traffic light."""

    RED = 0
    YELLOW = 1
    GREEN = 2

    def instruction(self) -> str:
        """What to do when the light shows this colour."""
        return _INSTRUCTIONS[self]


_NAMES = {
    TrafficLightColor.RED: "red",
    TrafficLightColor.YELLOW: "yellow",
    TrafficLightColor.GREEN: "green",
}

_INSTRUCTIONS = {
    TrafficLightColor.RED: "Stop",
    TrafficLightColor.YELLOW: "Get ready",
    TrafficLightColor.GREEN: "Go",
}


def color_name(color: TrafficLightColor | int) -> str:
    """The lower-case name of a colour, given as a member or its number."""
    try:
        return _NAMES[TrafficLightColor(color)]
    except ValueError:
        raise ValueError(f"unknown traffic light color: {color!r}") from None


def color_menu() -> str:
    """The list of colours offered to the user, as the prompt prints it."""
    return "".join(f"{color.value} - {color_name(color)}" for color in TrafficLightColor)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="traffic-light",
        description="Pick a traffic light colour by number and see what to do.",
    )
    parser.parse_args(argv)

    sys.stdout.write("Please input a color: " + color_menu())
    sys.stdout.flush()

    for line in sys.stdin:
        for token in line.split():
            try:
                number = int(token)
            except ValueError:
                continue
            if number in TrafficLightColor._value2member_map_:
                sys.stdout.write(TrafficLightColor(number).instruction())
            sys.stdout.write("\n")
            return 0
    sys.stdout.write("\n")
    return 1


if __name__ == "__main__":
    sys.exit(main())