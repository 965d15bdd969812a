from collections import defaultdict

from sqlalchemy import func, select
from sqlalchemy.orm import joinedload
from sqlalchemy.orm.attributes import set_committed_value

from employee_app.extensions import db
from employee_app.models.department import Department
from employee_app.models.employee import Employee


# ----------------------------
# FETCH-AND-ATTACH (2 queries)
# ----------------------------

def get_departments_with_employees_batched():
    """
    Loads departments, then every child employee in ONE second query,
    and attaches them by department_id in memory.

    Replaces the lazy per-department load (1 + N queries) with a fixed
    two-statement cost no matter how many departments exist.
    """
    departments = Department.query.order_by(Department.id).all()
    if not departments:
        return []

    employees = (
        Employee.query
        .filter(Employee.department_id.in_([d.id for d in departments]))
        .order_by(Employee.id)
        .all()
    )

    by_department = defaultdict(list)
    for emp in employees:
        by_department[emp.department_id].append(emp)

    # set_committed_value marks the collection as loaded without flagging
    # the parent dirty or triggering the lazy loader
    for dept in departments:
        set_committed_value(dept, "employees", by_department[dept.id])

    return departments


# ----------------------------
# EAGER JOIN (1 query)
# ----------------------------

def get_departments_with_employees_joined():
    """
    Single LEFT OUTER JOIN between department and employee.
    Loaded rows are detached from the session: read-only, no change tracking.
    """
    departments = (
        Department.query
        .options(joinedload(Department.employees))
        .order_by(Department.id)
        .all()
    )

    # expunge cascades to the loaded employees
    for dept in departments:
        db.session.expunge(dept)

    return departments


# ----------------------------
# PROJECTION (1 query)
# ----------------------------

def get_department_summaries():
    """
    Returns [{DeptName, TotalEmployees, EmpNames}] from a single statement.
    The employee count is computed by the database (correlated COUNT),
    names come from an outer join on the same statement.
    """
    employee_count = (
        select(func.count(Employee.id))
        .where(Employee.department_id == Department.id)
        .correlate(Department)
        .scalar_subquery()
    )

    rows = (
        db.session.query(
            Department.id,
            Department.name.label("dept_name"),
            employee_count.label("total_employees"),
            Employee.name.label("employee_name"),
        )
        .outerjoin(Employee, Employee.department_id == Department.id)
        .order_by(Department.id, Employee.id)
        .all()
    )

    summaries = []
    current_id = None
    for dept_id, dept_name, total_employees, employee_name in rows:
        if dept_id != current_id:
            current = {
                "DeptName": dept_name,
                "TotalEmployees": total_employees,
                "EmpNames": []
            }
            summaries.append(current)
            current_id = dept_id

        # NULL only when the outer join found no employee
        if employee_name is not None:
            current["EmpNames"].append(employee_name)

    return summaries
