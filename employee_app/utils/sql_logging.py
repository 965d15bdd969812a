import logging

from flask import g, has_request_context
from sqlalchemy import event

logger = logging.getLogger(__name__)

QUERY_COUNT_HEADER = "X-Query-Count"


def init_sql_logging(app, engine):
    """
    Hooks the engine so every statement is counted against the current
    request and, when SQL_LOG_ENABLED is set, written to the log.
    """
    log_statements = app.config.get("SQL_LOG_ENABLED", False)

    @event.listens_for(engine, "before_cursor_execute")
    def _before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        if has_request_context():
            g.query_count = g.get("query_count", 0) + 1

        if log_statements:
            logger.info("SQL: %s | params=%r", " ".join(statement.split()), parameters)


def reset_query_count():
    g.query_count = 0


def get_query_count():
    return g.get("query_count", 0)
