"""
Statement dispatch: look at the leading keywords of one assembled statement
and hand it to the matching parser, updating the registry and parser state.
"""
from typing import Optional

from sql2json.ddl_to_schema import parse_create_table
from sql2json.insert_to_rows import parse_insert_into
from sql2json.models import ParserState
from sql2json.registry import TableRegistry


def parse_statement(sql: str, state: ParserState, registry: TableRegistry,
                    limit: Optional[int] = None, skip_unparsable: bool = False) -> bool:
    """
    Process one statement (with or without its trailing ';').

    Returns False once more than `limit` statements have been seen; the
    statement that crossed the limit is not processed. Otherwise True,
    including for statements that could not be parsed.
    """
    sql = sql.strip()
    if not sql:
        return True

    state.processed_statements += 1
    if limit and state.processed_statements > limit:
        return False

    # transaction markers are matched case-sensitively, the rest are not
    if sql.startswith('START TRANSACTION'):
        state.inside_transaction = True
        return True
    if sql.startswith('COMMIT'):
        state.inside_transaction = False
        return True

    head = sql[:12].upper()
    if head.startswith('DROP TABLE'):
        return True

    if head.startswith('CREATE TABLE'):
        table = parse_create_table(sql, skip_unparsable=skip_unparsable)
        if table:
            registry.register(table)
            state.current_table = table["tableName"]
        return True

    if head.startswith('INSERT INTO'):
        insert = parse_insert_into(sql, skip_unparsable=skip_unparsable)
        # rows for tables without a CREATE TABLE are dropped silently
        if insert and insert["tableName"] in registry:
            registry.append_records(insert["tableName"], insert["records"])
        return True

    return True
