"""Employee kinds and how their monthly pay is worked out."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .education import Education

FACULTY_MONTHLY_SALARY = 5000.00
STAFF_MONTHLY_HOURS_WORKED = 160
WEEKS_PER_MONTH = 4


class Level(Enum):
    """Academic rank of a faculty member."""

    AS = 0
    AO = 1
    FU = 2

    def title(self) -> str:
        """Human-readable name of the rank."""
        return _LEVEL_TITLES[self]

    @property
    def salary_factor(self) -> float:
        """Multiplier applied to the base faculty salary."""
        return _LEVEL_FACTORS[self]


_LEVEL_TITLES = {
    Level.AS: "Assistant Professor",
    Level.AO: "Associate Professor",
    Level.FU: "Fulltime Professor",
}

_LEVEL_FACTORS = {
    Level.AS: 1.0,
    Level.AO: 1.2,
    Level.FU: 1.4,
}


@dataclass
class Employee:
    """A person on the payroll with no pay of their own."""

    last_name: str = "Doe"
    first_name: str = "John"
    name_id: str = "ID"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def monthly_earning(self) -> float:
        """Pay for one month."""
        return 0.0

    def describe(self) -> str:
        """Report block for this employee, ending with a blank line."""
        return f"Employee Name: {self.full_name}\nEmployee ID: {self.name_id}\n\n"

    def _report(self, detail: str) -> str:
        return (
            f"Employee ID: {self.name_id}\n"
            f"Employee Name: {self.full_name}\n"
            f"{detail}\n"
            f"Monthly Salary: ${self.monthly_earning():g}\n"
            "\n"
        )


@dataclass
class Staff(Employee):
    """Full-time staff paid by the hour for a fixed number of hours."""

    hourly_rate: float = 0.0

    def monthly_earning(self) -> float:
        return self.hourly_rate * STAFF_MONTHLY_HOURS_WORKED

    def describe(self) -> str:
        return self._report("Full time")


@dataclass
class PartTime(Staff):
    """Part-time staff paid by the hour for the hours worked each week."""

    week_hours: int = 0

    @property
    def monthly_hours(self) -> int:
        return self.week_hours * WEEKS_PER_MONTH

    def monthly_earning(self) -> float:
        return self.monthly_hours * self.hourly_rate

    def describe(self) -> str:
        return self._report(f"Hours worked per month: {self.monthly_hours}")


@dataclass
class Faculty(Employee):
    """Faculty member paid a salary that depends on rank."""

    education: Education = field(default_factory=Education)
    level: Level = Level.AS

    def monthly_earning(self) -> float:
        return FACULTY_MONTHLY_SALARY * self.level.salary_factor

    def describe(self) -> str:
        return self._report(self.level.title())