# trafficrecords

Command-line tools and a small library for traffic records kept in CSV files:

- **vehicle owners** (`trafficrecords.owners`): vehicle number, owner name,
  age, gender and address
- **traffic violations** (`trafficrecords.violations`): vehicle number,
  violation type and location
- **probable addressees** (`trafficrecords.addressees`): people who match the
  owner of a vehicle with a violation but live at a different address
- **accident evidence** (`trafficrecords.evidence`): witnesses, violation
  details, a response text and prior information, written to one CSV file per
  accident

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## File formats

Every input file starts with a header line, which is skipped.

| File | Default name | Row layout |
|------|--------------|------------|
| owners | `A4-Q1.csv` | `state,number,first,last,age,gender,address` |
| violations | `A4-Q2.csv` | `"vehicle number",type,location` |
| people | `A4-Q3.csv` | `first,last,age,gender,address` |

Fields are split on plain commas; quoting is not interpreted, except that a
violation's vehicle number is the text between its first pair of double
quotes. Commas inside a violation's location are kept, and trailing
whitespace is trimmed from it. The age is read from the leading digits of its
field. Fields past the last one listed are ignored.

An owner's vehicle number is built from the state code and the number. The
`traffic-owners` command joins them directly (`AB` and `12` give `AB12`);
`traffic-addressees` joins them with a comma (`AB,12`), so that they can match
the quoted vehicle numbers of the violations file. `load_owners(path,
join_with)` takes the separator as its second argument.

## Commands

Each command takes its file paths as optional positional arguments and falls
back to the default names in the current directory. If an input file cannot
be opened, the command reports it and carries on with no records; if a row is
malformed, it prints the problem and exits with status 1.

```
traffic-owners [OWNERS_CSV]
```
Loads the owners and shows a menu: 1 lists them, 2 adds a vehicle, 3 deletes
every record with a given vehicle number, 4 replaces the first record with the
same vehicle number. Deleting or editing a vehicle that is not there prints
"No such vehicle exists." Any other choice, or end of input, exits.

```
traffic-violations [VIOLATIONS_CSV]
```
Loads the violations and shows the same kind of menu. Deleting removes every
record equal to the one entered; editing asks for the original record and its
replacement and replaces the first match. Neither reports a missing record.

```
traffic-addressees [OWNERS_CSV [VIOLATIONS_CSV [PEOPLE_CSV]]]
```
Prints, under "The Probable Addressees are :", each person whose first name,
last name, age and gender equal those of the owner of a vehicle with a
violation and whose address differs from that owner's. Each line holds the
names, the age and the address.

```
traffic-evidence [DIRECTORY]
```
Asks for the number of witnesses and each witness's details, the violation
details, a response text and prior information. Answering `Y` or `y` records
another accident. Then writes `evidence_0.csv`, `evidence_1.csv` and so on
into the directory (default: the current one).

## Library use

```python
from trafficrecords.owners import OwnerRegistry, UnknownVehicleError, load_owners
from trafficrecords.violations import ViolationLog, load_violations
from trafficrecords.addressees import format_person, load_people, probable_addressees

owners = load_owners("A4-Q1.csv", ",")
violations = load_violations("A4-Q2.csv")
people = load_people("A4-Q3.csv")

for person in probable_addressees(violations, owners, people):
    print(format_person(person))

registry = OwnerRegistry(owners)
try:
    registry.delete("ZZ,0000")
except UnknownVehicleError:
    print("no such vehicle")
print("\n".join(registry.lines()))
```

- `OwnerRegistry.add`, `.edit` and `.delete` change the records in memory;
  `edit` and `delete` raise `UnknownVehicleError` (a `KeyError`) when no record
  has the vehicle number, and `delete` returns how many records it removed.
- `ViolationLog.edit` returns whether it found the original record;
  `ViolationLog.delete` returns how many records it removed.
- `parse_owner_line`, `parse_violation_line` and `parse_person_line` parse a
  single row; `format_owner`, `format_violation` and `format_person` give the
  display lines the commands print.
- `Evidence.to_csv()` returns the text of an evidence file,
  `Evidence.write_csv(path)` writes it, and
  `write_evidence_files(evidence_list, directory)` writes a numbered file for
  each record and returns their paths.

## What it does not do

- Changes made in the `traffic-owners` and `traffic-violations` menus are kept
  in memory only; nothing is written back to the CSV files.
- Evidence files are only written, never read back.
- There is no full CSV parsing: quoted fields containing commas are not
  supported, except in a violation's location.