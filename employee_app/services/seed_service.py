from employee_app.extensions import db
from employee_app.models.department import Department
from employee_app.models.employee import Employee

DEMO_DATA = [
    ("Dev", ["A", "B"]),
    ("HR", ["C"]),
]

DEFAULT_DEPARTMENTS = 10
DEFAULT_EMPLOYEES_PER_DEPARTMENT = 5


def build_seed_plan(departments=None, employees_per_department=None):
    if departments is None and employees_per_department is None:
        return DEMO_DATA

    if departments is None:
        departments = DEFAULT_DEPARTMENTS
    if employees_per_department is None:
        employees_per_department = DEFAULT_EMPLOYEES_PER_DEPARTMENT

    if departments < 0 or employees_per_department < 0:
        raise ValueError("Counts must not be negative")

    return [
        (
            f"Dept-{i}",
            [f"Emp-{i}-{j}" for j in range(1, employees_per_department + 1)]
        )
        for i in range(1, departments + 1)
    ]


def seed_demo_data(departments=None, employees_per_department=None):
    """
    Inserts demo rows only when the department table is empty.
    Returns how many departments were inserted.
    """
    plan = build_seed_plan(departments, employees_per_department)

    if Department.query.first() is not None:
        return 0

    for dept_name, employee_names in plan:
        dept = Department(
            name=dept_name,
            employees=[Employee(name=n) for n in employee_names]
        )
        db.session.add(dept)

    db.session.commit()
    return len(plan)
