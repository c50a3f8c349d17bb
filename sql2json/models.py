"""
Shapes shared by the parsers, the registry and the JSON writers.

Table and column entries are plain dicts so they serialize to JSON as-is;
the TypedDicts only document their keys.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, TypedDict, Union

SQLValue = Union[str, int, float, None]
Record = Dict[str, SQLValue]

# Historical export-tool artifact prepended to table names
TABLE_NAME_PREFIX = "SERVMASK_PREFIX_"


class ColumnDefinition(TypedDict):
    name: str
    type: str


class TableInfo(TypedDict):
    tableName: str
    columns: List[ColumnDefinition]
    data: List[Record]


class InsertInfo(TypedDict):
    tableName: str
    records: List[List[SQLValue]]


@dataclass
class ParserState:
    """Counters and flags updated by the statement dispatcher.

    inside_transaction and current_table are tracked for reporting only;
    they never change how a statement is parsed.
    """
    processed_statements: int = 0
    inside_transaction: bool = False
    current_table: Optional[str] = None

    def reset(self):
        self.processed_statements = 0
        self.inside_transaction = False
        self.current_table = None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "processedStatements": self.processed_statements,
            "insideTransaction": self.inside_transaction,
            "currentTable": self.current_table,
        }


def strip_table_prefix(name: str) -> str:
    if name.startswith(TABLE_NAME_PREFIX):
        return name[len(TABLE_NAME_PREFIX):]
    return name
