"""Interactive menu for managing employees and their monthly pay."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from contextlib import ExitStack
from pathlib import Path
from typing import Iterable, Optional, TextIO

from .education import Education
from .employees import Employee, Faculty, Level, PartTime, Staff

_STAFF_FILE = "staff.txt"
_FACULTY_FILE = "faculty.txt"
_PART_TIME_FILE = "partime.txt"


class _Tokens:
    """Whitespace-separated input read lazily from chunks of text."""

    def __init__(self, source: Iterable[str]):
        self._source = iter(source)
        self._pending: deque[str] = deque()

    def word(self) -> str:
        while not self._pending:
            try:
                chunk = next(self._source)
            except StopIteration:
                raise EOFError("end of input") from None
            self._pending.extend(chunk.split())
        return self._pending.popleft()

    def char(self) -> str:
        word = self.word()
        if len(word) > 1:
            self._pending.appendleft(word[1:])
        return word[0]

    def number(self, kind):
        word = self.word()
        try:
            return kind(word)
        except ValueError:
            raise ValueError(f"not a number: {word!r}") from None


def default_employees() -> list[Employee]:
    """The employees the program starts with."""
    return [
        Staff("Allen", "Paita", "123", 50.00),
        Staff("Zapata", "Steven", "456", 35.00),
        Staff("Rios", "Enrique", "789", 40.00),
        Faculty("Johnson", "Anne", "243", Education("Ph.D", "Engineering", 3), Level.FU),
        Faculty("Bouris", "William", "791", Education("Ph.D", "English", 1), Level.AO),
        Faculty("Andrade", "Christopher", "623", Education("MS", "Physical Education", 0), Level.AS),
        PartTime("Guzman", "Augusto", "455", 35.00, 30),
        PartTime("Depirro", "Martin", "678", 30.00, 15),
        PartTime("Aldaco", "Marque", "945", 20.00, 35),
    ]


def menu_text() -> str:
    """The main menu, ending with a blank line."""
    return (
        "------------ Menu ------------ \n"
        "a -- add data for an employee\n"
        "d -- display data for all employees\n"
        "w -- write all employee data to file\n"
        "r -- read all employee data from file \n"
        "q --- quit program \n"
        "\n"
    )


def add_employee(employees: list, tokens, out: TextIO) -> Optional[Employee]:
    """Prompt for a new employee, append it and return it.

    Returns None when the type or faculty level is not recognised.
    Raises ValueError on a malformed number and EOFError when input runs out.
    """
    reader = tokens if isinstance(tokens, _Tokens) else _Tokens(tokens)

    out.write("New Staff, Faculty, or Partime? (s/f/p): ")
    kind = reader.char()
    out.write("\n")
    out.write("Input Employee's Last Name: ")
    last = reader.word()
    out.write("Input Employee's First Name: ")
    first = reader.word()
    out.write("Input Employee's Name ID: ")
    name_id = reader.word()
    out.write("\n")

    employee: Employee
    if kind == "s":
        out.write("Input Employee's Hourly Rate: ")
        rate = reader.number(float)
        out.write("\n")
        employee = Staff(last, first, name_id, rate)
    elif kind == "f":
        out.write("Input Employee's Degree: ")
        degree = reader.word()
        out.write("Input Employee's Major: ")
        major = reader.word()
        out.write("Input Employee's Number of Research: ")
        research = reader.number(int)
        out.write("Input Faculty Level (AS/AO/FU): ")
        level_text = reader.word()
        out.write("\n")
        try:
            level = Level[level_text]
        except KeyError:
            out.write("N/A")
            return None
        employee = Faculty(last, first, name_id, Education(degree, major, research), level)
    elif kind == "p":
        out.write("Input Employee's Hourly Rate: ")
        rate = reader.number(float)
        out.write("\n")
        out.write("Input Employee's Hours: ")
        hours = reader.number(int)
        out.write("\n")
        employee = PartTime(last, first, name_id, rate, hours)
    else:
        out.write("Invalid employee type.\n")
        return None

    employees.append(employee)
    return employee


def salary_totals(employees: Iterable[Employee]) -> dict[str, float]:
    """Monthly pay summed per kind of employee and over everyone."""
    totals = {"part_time": 0.0, "faculty": 0.0, "staff": 0.0, "all": 0.0}
    for employee in employees:
        pay = employee.monthly_earning()
        totals["all"] += pay
        if isinstance(employee, PartTime):
            totals["part_time"] += pay
        elif isinstance(employee, Faculty):
            totals["faculty"] += pay
        elif isinstance(employee, Staff):
            totals["staff"] += pay
    return totals


def display_data(employees: list, out: TextIO) -> None:
    """Write every employee's report followed by the pay totals."""
    for employee in employees:
        out.write(employee.describe())
    totals = salary_totals(employees)
    out.write(f"Total monthly salary for all the part-time staff: ${totals['part_time']:g}\n")
    out.write(f"Total monthly salary for faculty: ${totals['faculty']:g}\n")
    out.write(f"Total monthly salary for all staff: ${totals['staff']:g}\n")
    out.write(f"Total monthly salary for all employees: ${totals['all']:g}\n")


def _file_entry(employee: Employee, detail: str) -> str:
    return (
        f"Employee ID: {employee.name_id}\n"
        f"Employee name: {employee.first_name} {employee.last_name}\n"
        f"{detail}\n"
        f"Monthly Salary: ${employee.monthly_earning():g}\n"
        "\n"
    )


def write_data(employees: Iterable[Employee], directory) -> None:
    """Write staff, faculty and part-time records to their own files."""
    directory = Path(directory)
    with ExitStack() as stack:
        part_file = stack.enter_context(open(directory / _PART_TIME_FILE, "w", encoding="utf-8"))
        faculty_file = stack.enter_context(open(directory / _FACULTY_FILE, "w", encoding="utf-8"))
        staff_file = stack.enter_context(open(directory / _STAFF_FILE, "w", encoding="utf-8"))
        for employee in employees:
            if isinstance(employee, PartTime):
                part_file.write(
                    _file_entry(employee, f"Hours worked per month: {employee.week_hours}")
                )
            elif isinstance(employee, Faculty):
                faculty_file.write(_file_entry(employee, employee.level.title()))
            elif isinstance(employee, Staff):
                staff_file.write(_file_entry(employee, "Full time"))


def read_data(directory, out: TextIO, err: TextIO) -> None:
    """Copy the staff, faculty and part-time files to out, reporting missing ones on err."""
    directory = Path(directory)
    for file_name, label in (
        (_STAFF_FILE, "staff"),
        (_FACULTY_FILE, "faculty"),
        (_PART_TIME_FILE, "partime"),
    ):
        try:
            with open(directory / file_name, encoding="utf-8") as handle:
                for line in handle:
                    out.write(line.rstrip("\n") + "\n")
        except OSError:
            err.write(f"no {label} employees\n")


def main(argv=None) -> int:
    """Run the interactive menu on standard input and output."""
    parser = argparse.ArgumentParser(prog="payroll", description="Employee payroll menu.")
    parser.add_argument(
        "--dir",
        dest="directory",
        type=Path,
        default=Path("."),
        help="directory for the employee data files",
    )
    args = parser.parse_args(argv)

    out = sys.stdout
    err = sys.stderr
    reader = _Tokens(sys.stdin)
    employees = default_employees()

    while True:
        out.write(menu_text())
        out.write("What would you like to do? (a/d/w/r/q): ")
        try:
            choice = reader.char()
        except EOFError:
            out.write("\n")
            return 0
        out.write("\n")

        if choice == "a":
            try:
                add_employee(employees, reader, out)
            except ValueError as exc:
                out.write(f"Invalid input: {exc}\n")
            except EOFError:
                out.write("\n")
                return 0
        elif choice == "d":
            display_data(employees, out)
        elif choice == "w":
            write_data(employees, args.directory)
        elif choice == "r":
            read_data(args.directory, out, err)
        elif choice == "q":
            out.write("Goodbye!\n")
            return 0
        else:
            out.write("Choice isn't available!\n")


if __name__ == "__main__":
    sys.exit(main())