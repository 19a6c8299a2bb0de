# payroll

A small interactive payroll ledger. It keeps a roster of three kinds of
employee and works out what each one earns in a month:

- **Staff**: full-time. They are paid their hourly rate for 160 hours a month.
- **Part-time**: they are paid their hourly rate for their weekly hours times four.
- **Faculty**: an Assistant Professor (`AS`) earns a monthly salary of $5000. An Associate Professor (`AO`) earns 1.2 times that, and a Fulltime Professor (`FU`) earns 1.4 times that.

## Installation

```
pip install .
```

## Usage

Start the menu:

```
payroll
```

The data files are read from and written to the current directory unless you
pass another one:

```
payroll --dir /path/to/data
```

The roster starts with nine sample employees. The program then shows this menu:

```
------------ Menu ------------
a -- add data for an employee
d -- display data for all employees
w -- write all employee data to file
r -- read all employee data from file
q --- quit program
```

- `a` asks for the employee type (`s`, `f` or `p`), the last name, the first
  name and the ID. It then asks for the fields that belong to that type:
  - staff: the hourly rate;
  - part-time: the hourly rate and the hours worked per week;
  - faculty: the degree, the major, the number of research works and the
    level (`AS`, `AO` or `FU`).

  An unknown type or level adds nothing. A malformed number is reported as
  invalid input and adds nothing.
- `d` prints each employee's record. It then prints the monthly salary
  totals for part-time staff, for faculty, for full-time staff and for
  everyone.
- `w` writes the roster as readable records to `staff.txt`, `faculty.txt`
  and `partime.txt`. In `partime.txt` the line labelled "Hours worked per
  month" holds the weekly hours as they were entered.
- `r` prints `staff.txt`, `faculty.txt` and `partime.txt` in that order. If a
  file is missing, a line such as `no staff employees` goes to standard error.
- `q` quits. The program also quits when the input ends.

## Use from Python

```python
import sys

from payroll.cli import default_employees, display_data, salary_totals
from payroll.employees import Faculty, Level, PartTime, Staff

roster = default_employees()
roster.append(PartTime("Doe", "Jane", "001", hourly_rate=25.0, week_hours=20))

display_data(roster, sys.stdout)
print(salary_totals(roster))  # keys: part_time, faculty, staff, all
```

- `payroll.employees` holds `Employee`, `Staff`, `PartTime` and `Faculty`,
  and the `Level` enum with `title()`. `monthly_earning()` returns what an
  employee earns in a month. `describe()` returns the employee's printable
  record.
- `payroll.education` holds `Education`, which records a faculty member's
  degree, major and number of research works.
- `payroll.cli` holds `default_employees`, `menu_text`, `add_employee`,
  `salary_totals`, `display_data`, `write_data`, `read_data` and `main`.

## What it does not do

The roster exists only while the program runs. The files written by `w` are
reports meant for people to read. `r` only prints those files and does not load
employees from them, so every run starts again from the nine sample employees.
The program cannot edit or remove an employee once they are added.