import pytest

from payroll.education import Education
from payroll.employees import (
    FACULTY_MONTHLY_SALARY,
    STAFF_MONTHLY_HOURS_WORKED,
    Employee,
    Faculty,
    Level,
    PartTime,
    Staff,
)


def test_employee_defaults():
    employee = Employee()
    assert (employee.last_name, employee.first_name, employee.name_id) == (
        "Doe",
        "John",
        "ID",
    )
    assert employee.monthly_earning() == 0


def test_employee_describe():
    assert Employee().describe() == "Employee Name: John Doe\nEmployee ID: ID\n\n"


@pytest.mark.parametrize("rate", [0.0, 20.0, 35.5, 50.0])
def test_staff_pays_fixed_hours(rate):
    staff = Staff("Rios", "Enrique", "789", rate)
    assert staff.monthly_earning() == pytest.approx(rate * STAFF_MONTHLY_HOURS_WORKED)


def test_staff_default_rate_earns_nothing():
    assert Staff().monthly_earning() == 0


def test_staff_describe_exact():
    staff = Staff("Allen", "Paita", "123", 50.0)
    assert staff.describe() == (
        "Employee ID: 123\n"
        "Employee Name: Paita Allen\n"
        "Full time\n"
        "Monthly Salary: $8000\n"
        "\n"
    )


def test_part_time_is_staff_and_uses_its_rate():
    part = PartTime("Guzman", "Augusto", "455", 35.0, 30)
    assert isinstance(part, Staff)
    assert part.hourly_rate == 35.0
    before = part.monthly_earning()
    part.hourly_rate = 70.0
    assert part.monthly_earning() == pytest.approx(2 * before)


def test_part_time_earning_pinned():
    part = PartTime("Guzman", "Augusto", "455", 35.0, 30)
    assert part.monthly_earning() == pytest.approx(4200)


def test_part_time_earning_scales_with_hours():
    short = PartTime("Depirro", "Martin", "678", 30.0, 15)
    long = PartTime("Depirro", "Martin", "678", 30.0, 30)
    assert long.monthly_earning() == pytest.approx(2 * short.monthly_earning())


def test_part_time_default_hours_earn_nothing():
    assert PartTime(hourly_rate=25.0).monthly_earning() == 0


def test_part_time_describe_lines():
    part = PartTime("Aldaco", "Marque", "945", 20.0, 35)
    lines = part.describe().split("\n")
    assert lines[0] == "Employee ID: 945"
    assert lines[1] == "Employee Name: Marque Aldaco"
    assert lines[2] == "Hours worked per month: 140"
    assert lines[3].startswith("Monthly Salary: $")
    assert lines[4:] == ["", ""]


def test_level_titles_and_values():
    assert Level.AS.title() == "Assistant Professor"
    assert Level.AO.title() == "Associate Professor"
    assert Level.FU.title() == "Fulltime Professor"
    assert Level(0) is Level.AS
    assert Level(1) is Level.AO
    assert Level(2) is Level.FU


def test_faculty_defaults():
    faculty = Faculty()
    assert faculty.level is Level.AS
    assert faculty.education == Education()
    assert faculty.monthly_earning() == FACULTY_MONTHLY_SALARY


def test_faculty_salary_rises_with_level():
    pays = [Faculty("Johnson", "Anne", "243", level=level).monthly_earning() for level in Level]
    assert pays == sorted(pays)
    assert len(set(pays)) == 3
    assert pays[1] == pytest.approx(FACULTY_MONTHLY_SALARY * 1.2)
    assert pays[2] == pytest.approx(FACULTY_MONTHLY_SALARY * 1.4)


def test_faculty_keeps_education():
    education = Education("Ph.D", "English", 1)
    faculty = Faculty("Bouris", "William", "791", education, Level.AO)
    assert faculty.education.major == "English"
    assert faculty.education.research_num == 1


def test_faculty_describe_shows_title():
    faculty = Faculty("Andrade", "Christopher", "623", Education("MS", "Physical Education", 0), Level.AS)
    lines = faculty.describe().split("\n")
    assert lines[0] == "Employee ID: 623"
    assert lines[1] == "Employee Name: Christopher Andrade"
    assert lines[2] == "Assistant Professor"
    assert lines[3] == "Monthly Salary: $5000"


def test_level_change_changes_pay():
    faculty = Faculty()
    before = faculty.monthly_earning()
    faculty.level = Level.FU
    assert faculty.monthly_earning() > before