"""A student roster with a text menu, plus a few small string exercises."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TextIO

__all__ = [
    "Student",
    "DuplicateStudentError",
    "StudentRoster",
    "default_roster",
    "is_same_image",
    "max_letter",
    "format_grid",
    "run_menu",
    "main",
]


@dataclass
class Student:
    """A student identified by number."""

    number: int
    name: str
    score: int

    def __str__(self) -> str:
        return f"[{self.number}]{self.name} : {self.score}"


class DuplicateStudentError(KeyError):
    """Raised when adding a student whose number is already taken."""


class StudentRoster:
    """Students keyed by number, iterated in number order."""

    def __init__(self, students: Iterable[Student] = ()) -> None:
        self._students: dict[int, Student] = {}
        for student in students:
            self.add(student)

    def add(self, student: Student) -> None:
        """Add ``student``; raise DuplicateStudentError if the number is taken."""
        if student.number in self._students:
            raise DuplicateStudentError(student.number)
        self._students[student.number] = student

    def remove(self, number: int) -> bool:
        """Remove the student with ``number``; tell whether one was there."""
        return self._students.pop(number, None) is not None

    def total(self) -> int:
        """Sum of all scores."""
        return sum(student.score for student in self._students.values())

    def average(self) -> int:
        """Integer average of the scores; raises ValueError for an empty roster."""
        if not self._students:
            raise ValueError("the roster is empty")
        return self.total() // len(self._students)

    def above_average(self) -> list[Student]:
        """Students whose score is at least the average, in number order."""
        average = self.average()
        return [student for student in self if student.score >= average]

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[Student]:
        return (self._students[number] for number in sorted(self._students))


def default_roster() -> StudentRoster:
    """The roster the menu starts with."""
    return StudentRoster(
        [
            Student(1, "Kim", 80),
            Student(2, "Lee", 20),
            Student(3, "Park", 40),
            Student(4, "Choi", 30),
        ]
    )


def is_same_image(first: str, second: str) -> bool:
    """Tell whether the two strings are anagrams of each other."""
    return sorted(first) == sorted(second)


def max_letter(text: str) -> str:
    """Return the most frequent character; on a tie, the one that reached the count first."""
    if not text:
        raise ValueError("text must not be empty")
    counts: Counter[str] = Counter()
    best, best_count = "", 0
    for char in text:
        counts[char] += 1
        if counts[char] > best_count:
            best, best_count = char, counts[char]
    return best


def format_grid(rows: int, columns: int) -> str:
    """Render a rows x columns grid filled with -1 as nested braces."""
    if rows < 0 or columns < 0:
        raise ValueError("rows and columns must not be negative")
    row = "{" + ",".join(["-1"] * columns) + "}"
    body = ",\n".join([row] * rows)
    return "{\n" + body + "\n}\n"


_MENU = (
    "1. Add student\n"
    "2. Remove student (number)\n"
    "3. Print all students\n"
    "4. Total and average\n"
    "5. Students at or above average\n"
    "6. Quit\n"
)


def run_menu(roster: StudentRoster, lines: Iterable[str], out: TextIO) -> None:
    """Drive ``roster`` from whitespace-separated commands read from ``lines``.

    The menu stops on command 6 or when the input runs out.
    """
    tokens = (token for line in lines for token in line.split())

    while True:
        out.write(_MENU)
        out.write("> ")
        command = next(tokens, None)
        if command is None:
            out.write("\n")
            return

        if command == "1":
            out.write("number name score : ")
            fields = [next(tokens, None) for _ in range(3)]
            if None in fields:
                out.write("\n")
                return
            try:
                student = Student(int(fields[0]), fields[1], int(fields[2]))
            except ValueError:
                out.write("Invalid input.\n")
                continue
            try:
                roster.add(student)
            except DuplicateStudentError:
                out.write("Duplicate student number.\n")
        elif command == "2":
            out.write("Number to remove : ")
            raw = next(tokens, None)
            if raw is None:
                out.write("\n")
                return
            try:
                roster.remove(int(raw))
            except ValueError:
                out.write("Invalid input.\n")
        elif command == "3":
            for student in roster:
                out.write(f"{student}\n")
        elif command == "4":
            if not len(roster):
                out.write("No students.\n")
            else:
                out.write(f"Total : {roster.total()}, Average : {roster.average()}\n")
        elif command == "5":
            if not len(roster):
                out.write("No students.\n")
            else:
                for student in roster.above_average():
                    out.write(f"{student}\n")
        elif command == "6":
            return
        else:
            out.write("Invalid command.\n")


def main(argv: list[str] | None = None) -> int:
    """Run the roster menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="dsalgo-students",
        description="Manage a small roster of students.",
    )
    parser.parse_args(argv)
    run_menu(default_roster(), sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())