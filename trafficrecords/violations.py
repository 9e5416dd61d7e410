"""Traffic violation records: CSV loading, an in-memory log and an interactive menu."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_CSV = "A4-Q2.csv"

_TRAILING_SPACE = " \t\n\r\f\v"

_MENU = (
    "Press 1 to display Violations data\n"
    "Press 2 to add new Violation\n"
    "Press 3 to delete Violation\n"
    "Press 4 to edit a Violation"
)


@dataclass(frozen=True)
class Violation:
    """One recorded traffic violation."""

    vehicle_number: str
    kind: str
    location: str


def parse_violation_line(line: str) -> Violation:
    """Parse a row of the form ``"<vehicle number>",<type>,<location>``.

    Trailing whitespace is trimmed from the location unless it is all
    whitespace; commas inside the location are kept.
    """
    parts = line.split('"', 2)
    if len(parts) < 3:
        raise ValueError(f"no quoted vehicle number in row: {line!r}")
    vehicle_number, rest = parts[1], parts[2]
    fields = rest.split(",", 2)
    kind = fields[1] if len(fields) > 1 else ""
    location = fields[2] if len(fields) > 2 else ""
    trimmed = location.rstrip(_TRAILING_SPACE)
    if trimmed:
        location = trimmed
    return Violation(vehicle_number, kind, location)


def load_violations(path: str | Path) -> list[Violation]:
    """Read violation rows from a CSV file, skipping its header line."""
    with open(path, encoding="utf-8") as handle:
        rows = iter(handle)
        next(rows, None)
        return [parse_violation_line(row.rstrip("\n")) for row in rows]


def format_violation(violation: Violation) -> str:
    """Render a violation as a single space-separated display line."""
    return f"{violation.vehicle_number} {violation.kind} {violation.location}"


@dataclass
class ViolationLog:
    """An ordered collection of violation records."""

    violations: list[Violation] = field(default_factory=list)

    def __iter__(self) -> Iterator[Violation]:
        return iter(self.violations)

    def __len__(self) -> int:
        return len(self.violations)

    def add(self, violation: Violation) -> None:
        """Append a violation."""
        self.violations.append(violation)

    def edit(self, original: Violation, replacement: Violation) -> bool:
        """Replace the first record equal to ``original``; report whether one was found."""
        for position, existing in enumerate(self.violations):
            if existing == original:
                self.violations[position] = replacement
                return True
        return False

    def delete(self, violation: Violation) -> int:
        """Remove every record equal to ``violation`` and return how many went."""
        kept = [v for v in self.violations if v != violation]
        removed = len(self.violations) - len(kept)
        self.violations[:] = kept
        return removed

    def lines(self) -> Iterator[str]:
        """Yield the display line of every record in order."""
        return (format_violation(v) for v in self.violations)


def _read_word(prompt: str) -> str:
    """Read the next whitespace-delimited word, skipping blank lines."""
    text = input(prompt)
    while not text.split():
        text = input()
    return text.split()[0]


def _prompt_violation(number_prompt: str, location_prompt: str) -> Violation:
    vehicle_number = _read_word(number_prompt)
    kind = _read_word("Enter type of violation: ")
    location = input(location_prompt)
    return Violation(vehicle_number, kind, location)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive violation-records menu."""
    parser = argparse.ArgumentParser(description="Manage traffic violation records.")
    parser.add_argument("csv", nargs="?", default=DEFAULT_CSV, help="violation CSV file")
    args = parser.parse_args(argv)

    try:
        violations = load_violations(args.csv)
    except OSError:
        print("Error while opening file", file=sys.stderr)
        violations = []
    except ValueError as exc:
        print(f"Malformed violation file: {exc}", file=sys.stderr)
        return 1
    log = ViolationLog(violations)

    try:
        while True:
            print(_MENU)
            choice = _read_word("")[:1]
            if choice == "1":
                for line in log.lines():
                    print(line)
            elif choice == "2":
                log.add(_prompt_violation("Enter vehicle number: ", "Enter location of violation: "))
            elif choice == "3":
                log.delete(_prompt_violation("Enter vehicle number: ", "Enter location of violation: "))
            elif choice == "4":
                original = _prompt_violation(
                    "Enter original vehicle number: ", "Enter location of violation: "
                )
                replacement = _prompt_violation(
                    "Enter new vehicle number: ", "Enter new location of violation: "
                )
                log.edit(original, replacement)
            else:
                break
    except EOFError:
        pass
    print("Exiting question 2")
    return 0


if __name__ == "__main__":
    sys.exit(main())