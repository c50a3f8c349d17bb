"""
sql2json - convert SQL dumps (CREATE TABLE / INSERT INTO) to JSON.
"""
from sql2json.config import ConverterOptions
from sql2json.converter import (SQLToJSONConverter, create_converter,
                                process_large_sql, sql_to_json, sql_to_json_files)
from sql2json.ddl_to_schema import parse_create_table
from sql2json.insert_to_rows import parse_insert_into
from sql2json.models import ParserState
from sql2json.registry import TableRegistry
from sql2json.statement_parser import parse_statement
from sql2json.values import normalize_literal, tokenize_values

__version__ = "1.0.0"

__all__ = [
    "ConverterOptions",
    "ParserState",
    "SQLToJSONConverter",
    "TableRegistry",
    "create_converter",
    "normalize_literal",
    "parse_create_table",
    "parse_insert_into",
    "parse_statement",
    "process_large_sql",
    "sql_to_json",
    "sql_to_json_files",
    "tokenize_values",
]
