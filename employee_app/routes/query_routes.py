import logging

from flask import Blueprint, jsonify, request

from employee_app.serializers import department_to_dict, employee_to_dict
from employee_app.services.department_service import (
    get_departments_with_employees_batched,
    get_departments_with_employees_joined,
    get_department_summaries,
)
from employee_app.services.employee_service import (
    find_employees_by_name,
    find_employees_by_name_in_memory,
)
from employee_app.utils.sql_logging import (
    QUERY_COUNT_HEADER,
    get_query_count,
    reset_query_count,
)

logger = logging.getLogger(__name__)

query_bp = Blueprint("query", __name__)


@query_bp.before_request
def start_query_count():
    reset_query_count()


@query_bp.after_request
def report_query_count(response):
    count = get_query_count()
    response.headers[QUERY_COUNT_HEADER] = str(count)
    logger.info("%s %s -> %d SQL statement(s)", request.method, request.path, count)
    return response


# =========================================================
# SCENARIO 1: fetch-and-attach (replaces the N+1 pattern)
# =========================================================

@query_bp.route("/n-plus-one")
def n_plus_one():
    departments = get_departments_with_employees_batched()
    return jsonify([department_to_dict(d) for d in departments])


# =========================================================
# SCENARIO 2: eager JOIN
# =========================================================

@query_bp.route("/eager")
def eager():
    departments = get_departments_with_employees_joined()
    return jsonify([department_to_dict(d) for d in departments])


# =========================================================
# SCENARIO 3: projection
# =========================================================

@query_bp.route("/projection")
def projection():
    return jsonify(get_department_summaries())


# =========================================================
# SCENARIO 4: filter in the database vs filter in memory
# =========================================================

@query_bp.route("/query-vs-enumerable")
def query_vs_enumerable():
    name = request.args.get("name")

    query_result = find_employees_by_name(name)
    list_result = find_employees_by_name_in_memory(name)

    return jsonify({
        "queryResult": [employee_to_dict(e) for e in query_result],
        "listResult": [employee_to_dict(e) for e in list_result]
    })
