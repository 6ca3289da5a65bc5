"""Greeting and quiz behaviour shared by unrelated kinds of participant."""

from __future__ import annotations

import argparse
import sys
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, TextIO

CPP_PROGRAM = "int main() { return 0; }"


class ProgrammingLanguage(Enum):
    """A language a person may know how to program in."""

    NONE = 0
    CPP = 1
    CSHARP = 2
    JAVA = 3


class Greeter(ABC):
    """Something that can introduce itself and take its leave."""

    @abstractmethod
    def introduce(self, out: TextIO) -> None:
        """Write an introduction to ``out``."""

    @abstractmethod
    def excuse(self, out: TextIO) -> None:
        """Write a reason for leaving to ``out``."""


class Answerer(ABC):
    """Something that can answer quiz questions."""

    @abstractmethod
    def compute_sum(self, a: int, b: int) -> int:
        """The answer given to ``a + b``."""

    @abstractmethod
    def write_cpp_program(self, out: TextIO) -> None:
        """Write a program to ``out``, if able to."""


@dataclass
class Person(Greeter, Answerer):
    """A person who greets, and adds numbers up to a limit they can hold."""

    name: str
    excuse_text: str
    language: ProgrammingLanguage
    max_number: int

    def introduce(self, out: TextIO) -> None:
        out.write(f"Hi. My name is {self.name}\n")

    def excuse(self, out: TextIO) -> None:
        out.write(f"{self.excuse_text}\n")

    def compute_sum(self, a: int, b: int) -> int:
        return min(a + b, self.max_number)

    def write_cpp_program(self, out: TextIO) -> None:
        if self.language is ProgrammingLanguage.CPP:
            out.write(CPP_PROGRAM + "\n")


@dataclass
class Dog(Answerer):
    """A dog that answers every sum with its favourite number."""

    favorite_number: int

    def compute_sum(self, a: int, b: int) -> int:
        return self.favorite_number

    def write_cpp_program(self, out: TextIO) -> None:
        pass


@dataclass(frozen=True)
class Behaviour:
    """A table of functions operating on a separately supplied context."""

    introduce: Callable[[Any, TextIO], None]
    answer: Callable[[Any, int, int], int]


def _say_woof(context: Any, out: TextIO) -> None:
    out.write("Woof\n")


def _say_name(context: Any, out: TextIO) -> None:
    out.write(f"Hi. My name is {context.name}\n")


SILENT_BEHAVIOUR = Behaviour(
    introduce=lambda context, out: None,
    answer=lambda context, a, b: 0,
)
DOG_BEHAVIOUR = Behaviour(
    introduce=_say_woof,
    answer=lambda context, a, b: context.favorite_number,
)
HUMAN_BEHAVIOUR = Behaviour(
    introduce=_say_name,
    answer=lambda context, a, b: a + b,
)


def greet_and_answer(behaviour: Behaviour, context: Any, out: TextIO) -> None:
    """Introduce the context, then write its answer to 5 + 6 on its own line."""
    behaviour.introduce(context, out)
    out.write(f"{behaviour.answer(context, 5, 6)}\n")


def quiz(subject: Answerer, out: TextIO) -> None:
    """Ask the subject the three quiz questions, writing questions and answers."""
    out.write("Question 1: What is 5 + 6?\n")
    out.write(f"Answer: {subject.compute_sum(5, 6)}\n")
    out.write("Question 2: What is 10 + 20?\n")
    out.write(f"Answer: {subject.compute_sum(10, 20)}\n")
    out.write("Question 3: Write a C++ program\n")
    subject.write_cpp_program(out)


def enter_and_leave(subject: Greeter, out: TextIO) -> None:
    """Let the subject introduce itself and then excuse itself."""
    subject.introduce(out)
    subject.excuse(out)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="quiz", description="Quiz and greet a few sample participants."
    )
    parser.parse_args(argv)
    out = sys.stdout

    john = Person("John", "I'm not feeling well", ProgrammingLanguage.CPP, 30)
    jane = Person("Jane", "I gotta go", ProgrammingLanguage.JAVA, 20)
    husky = Dog(11)

    for subject in (john, jane, husky):
        quiz(subject, out)
    for greeter in (john, jane):
        enter_and_leave(greeter, out)

    greet_and_answer(SILENT_BEHAVIOUR, None, out)
    greet_and_answer(DOG_BEHAVIOUR, husky, out)
    greet_and_answer(HUMAN_BEHAVIOUR, john, out)
    greet_and_answer(HUMAN_BEHAVIOUR, jane, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())