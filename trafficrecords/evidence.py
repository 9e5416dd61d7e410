"""Accident evidence records gathered interactively and saved as CSV files."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from trafficrecords.addressees import Person
from trafficrecords.violations import Violation

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


@dataclass
class Evidence:
    """Witnesses, violation details, a response and prior information for one accident."""

    witnesses: list[Person] = field(default_factory=list)
    violation: Violation = field(default_factory=lambda: Violation("", "", ""))
    response_text: str = ""
    prior_info: str = ""

    def to_csv(self) -> str:
        """Render the evidence as CSV text: one row per witness, then the rest."""
        rows = [
            f"{w.first_name},{w.last_name},{w.age},{w.gender},{w.address}"
            for w in self.witnesses
        ]
        v = self.violation
        rows.append(f"{v.vehicle_number},{v.kind},{v.location}")
        rows.append(self.response_text)
        rows.append(self.prior_info)
        return "".join(row + "\n" for row in rows)

    def write_csv(self, path: str | Path) -> None:
        """Write the evidence to a CSV file, replacing any existing content."""
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write(self.to_csv())


def write_evidence_files(
    evidence_list: Iterable[Evidence], directory: str | Path = "."
) -> list[Path]:
    """Write each evidence record to ``evidence_<n>.csv`` in directory; return the paths."""
    base = Path(directory)
    paths = []
    for index, evidence in enumerate(evidence_list):
        path = base / f"evidence_{index}.csv"
        evidence.write_csv(path)
        paths.append(path)
    return paths


def _read_word(prompt: str) -> str:
    text = input(prompt)
    while not text.split():
        text = input()
    return text.split()[0]


def _read_int(prompt: str) -> int:
    word = _read_word(prompt)
    match = _INT_PREFIX.match(word)
    if match is None:
        raise ValueError(f"not a number: {word!r}")
    return int(match.group(1))


def _prompt_witness() -> Person:
    first_name = _read_word("Enter first name: ")
    last_name = _read_word("Enter last name: ")
    age = _read_int("Enter age: ")
    gender = _read_word("Enter gender: ")
    address = input("Enter address: ")
    return Person(first_name, last_name, age, gender, address)


def _prompt_violation() -> Violation:
    vehicle_number = _read_word("Enter vehicle number: ")
    kind = _read_word("Enter type of violation: ")
    location = input("Enter location of violation: ")
    return Violation(vehicle_number, kind, location)


def _prompt_evidence() -> Evidence:
    count = _read_int("Enter the number of witnesses for the accident: ")
    witnesses = [_prompt_witness() for _ in range(max(count, 0))]
    violation = _prompt_violation()
    response_text = input("Enter response text: ")
    prior_info = input("Enter any prior information about the person: ")
    return Evidence(witnesses, violation, response_text, prior_info)


def main(argv: list[str] | None = None) -> int:
    """Collect evidence for one or more accidents and write each to its own CSV file."""
    parser = argparse.ArgumentParser(description="Record accident evidence.")
    parser.add_argument(
        "directory", nargs="?", default=".", help="directory for the evidence files"
    )
    args = parser.parse_args(argv)

    evidence_list: list[Evidence] = []
    try:
        while True:
            evidence_list.append(_prompt_evidence())
            print("For adding more evidence for other accidents, press Y/y")
            if _read_word("")[:1] not in ("Y", "y"):
                break
    except EOFError:
        pass
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    try:
        write_evidence_files(evidence_list, args.directory)
    except OSError:
        print("Error while opening file", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())