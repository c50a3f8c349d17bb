"""
In-memory table registry filled while a dump is being parsed.
"""
from typing import Dict, Iterator, List, Optional

from sql2json.models import Record, SQLValue, TableInfo


class TableRegistry:
    """Maps table name -> table entry (columns + accumulated rows), in the
    order tables were first created."""

    def __init__(self):
        self.tables: Dict[str, TableInfo] = {}

    def __contains__(self, table_name: str) -> bool:
        return table_name in self.tables

    def __len__(self) -> int:
        return len(self.tables)

    def __iter__(self) -> Iterator[TableInfo]:
        return iter(self.tables.values())

    def get(self, table_name: str) -> Optional[TableInfo]:
        return self.tables.get(table_name)

    def register(self, table: TableInfo):
        """Add a table, replacing any earlier table of the same name along
        with the rows collected for it. A replaced table keeps its original
        position."""
        self.tables[table["tableName"]] = table

    def append_records(self, table_name: str, records: List[List[SQLValue]]) -> int:
        """
        Map each value row onto the table's columns by position and append
        it. Values beyond the column count are dropped; missing trailing
        values are left out of the record rather than set to None.

        Returns the number of rows appended (0 when the table is unknown).
        """
        table = self.tables.get(table_name)
        if table is None:
            return 0
        names = [col["name"] for col in table["columns"]]
        for row in records:
            record: Record = dict(zip(names, row))
            table["data"].append(record)
        return len(records)

    def table_names(self) -> List[str]:
        return list(self.tables)

    def total_records(self) -> int:
        return sum(len(t["data"]) for t in self.tables.values())

    def reset(self):
        self.tables = {}
