"""Match violations to owners and list people who may live at a different address."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from trafficrecords.owners import DEFAULT_CSV as DEFAULT_OWNERS_CSV
from trafficrecords.owners import VehicleOwner, load_owners
from trafficrecords.violations import DEFAULT_CSV as DEFAULT_VIOLATIONS_CSV
from trafficrecords.violations import Violation, load_violations

DEFAULT_PEOPLE_CSV = "A4-Q3.csv"

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Person:
    """A person known by name, age, gender and address."""

    first_name: str
    last_name: str
    age: int
    gender: str
    address: str


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid age: {text!r}")
    return int(match.group(1))


def parse_person_line(line: str) -> Person:
    """Parse one data row: first name, last name, age, gender, address.

    Anything after the address field is ignored.
    """
    fields = line.split(",")
    if len(fields) < 3:
        raise ValueError(f"too few fields in person row: {line!r}")
    first_name, last_name, age_text = fields[:3]
    gender = fields[3] if len(fields) > 3 else ""
    address = fields[4] if len(fields) > 4 else ""
    return Person(first_name, last_name, _leading_int(age_text), gender, address)


def load_people(path: str | Path) -> list[Person]:
    """Read person rows from a CSV file, skipping its header line."""
    with open(path, encoding="utf-8") as handle:
        rows = iter(handle)
        next(rows, None)
        return [parse_person_line(row.rstrip("\n")) for row in rows]


def probable_addressees(
    violations: Iterable[Violation],
    owners: Iterable[VehicleOwner],
    people: Iterable[Person],
) -> Iterator[Person]:
    """Yield people matching the owner of a violating vehicle but at another address.

    A person matches an owner when first name, last name, age and gender agree.
    Results come in violation order, then owner order, then person order.
    """
    owners = list(owners)
    people = list(people)
    for violation in violations:
        for owner in owners:
            if owner.vehicle_number != violation.vehicle_number:
                continue
            for person in people:
                if (
                    person.first_name == owner.first_name
                    and person.last_name == owner.last_name
                    and person.age == owner.age
                    and person.gender == owner.gender
                    and person.address != owner.address
                ):
                    yield person


def format_person(person: Person) -> str:
    """Render a person as a display line: names, age and address."""
    return f"{person.first_name} {person.last_name} {person.age} {person.address}"


def main(argv: list[str] | None = None) -> int:
    """Print the probable addressees for every recorded violation."""
    parser = argparse.ArgumentParser(description="List probable addressees of violations.")
    parser.add_argument("owners", nargs="?", default=DEFAULT_OWNERS_CSV, help="owner CSV file")
    parser.add_argument(
        "violations", nargs="?", default=DEFAULT_VIOLATIONS_CSV, help="violation CSV file"
    )
    parser.add_argument("people", nargs="?", default=DEFAULT_PEOPLE_CSV, help="people CSV file")
    args = parser.parse_args(argv)

    try:
        try:
            owners = load_owners(args.owners, join_with=",")
        except OSError:
            print("error while opening file", file=sys.stderr)
            owners = []
        try:
            violations = load_violations(args.violations)
        except OSError:
            print("Error while opening file", file=sys.stderr)
            violations = []
        try:
            people = load_people(args.people)
        except OSError:
            print("error while opening file", file=sys.stderr)
            people = []
    except ValueError as exc:
        print(f"Malformed input file: {exc}", file=sys.stderr)
        return 1

    print("The Probable Addressees are : ")
    for person in probable_addressees(violations, owners, people):
        print(format_person(person))
    return 0


if __name__ == "__main__":
    sys.exit(main())