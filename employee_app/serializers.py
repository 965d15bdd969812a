"""
JSON shapes for the /Test endpoints.

Parents embed their children; children carry only the foreign key back
to the parent, so the output never contains a reference cycle.
"""


def employee_to_dict(employee):
    return {
        "id": employee.id,
        "name": employee.name,
        "departmentId": employee.department_id
    }


def department_to_dict(department):
    # Reads department.employees, which must already be loaded by the caller
    return {
        "id": department.id,
        "name": department.name,
        "employees": [employee_to_dict(e) for e in department.employees]
    }
