from employee_app.models.employee import Employee


def find_employees_by_name(name):
    """WHERE employee.name = :name runs in the database."""
    return (
        Employee.query
        .filter(Employee.name == name)
        .order_by(Employee.id)
        .all()
    )


def find_employees_by_name_in_memory(name):
    """
    Same filter, applied in Python after pulling the WHOLE table.
    Kept only to show the cost of an unbounded full-table transfer.
    """
    everyone = Employee.query.all()
    return [e for e in everyone if e.name == name]
