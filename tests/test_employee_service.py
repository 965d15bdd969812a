from employee_app.extensions import db
from employee_app.models.department import Department
from employee_app.models.employee import Employee
from employee_app.services.employee_service import (
    find_employees_by_name,
    find_employees_by_name_in_memory,
)


def _ids(employees):
    return sorted(e.id for e in employees)


def test_pushdown_filter_puts_name_in_where_clause(statements):
    result = find_employees_by_name("A")

    assert [e.name for e in result] == ["A"]
    assert len(statements) == 1
    assert "WHERE" in statements[0].upper()


def test_in_memory_filter_selects_whole_table(statements):
    result = find_employees_by_name_in_memory("A")

    assert [e.name for e in result] == ["A"]
    assert len(statements) == 1
    assert "WHERE" not in statements[0].upper()


def test_both_filters_agree(statements):
    for name in ["A", "B", "C", "nobody", "", "a", None]:
        assert _ids(find_employees_by_name(name)) == _ids(find_employees_by_name_in_memory(name))


def test_duplicate_names_are_all_returned(statements):
    dev = Department.query.filter_by(name="Dev").one()
    db.session.add(Employee(name="C", department=dev))
    db.session.commit()

    assert len(find_employees_by_name("C")) == 2
    assert _ids(find_employees_by_name("C")) == _ids(find_employees_by_name_in_memory("C"))
