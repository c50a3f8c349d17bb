"""
insert_to_rows.py
Parse one INSERT INTO statement into its table name and typed value rows:
{"tableName": "users", "records": [[1, "alice"], [2, None]]}
"""
import re
import sys
from typing import List, Optional

from sql2json.models import InsertInfo, strip_table_prefix
from sql2json.values import parse_values

INSERT_INTO_RE = re.compile(
    r'INSERT\s+INTO\s+[`"]?([^`"\s(]+)[`"]?\s*(?:\([^)]+\))?\s*VALUES',
    flags=re.I,
)
VALUES_RE = re.compile(r'VALUES\s*(.*)', flags=re.I | re.S)


def split_value_groups(s: str) -> List[str]:
    """
    Split "(1,'a'),(2,'b');" into the row interiors ["1,'a'", "2,'b'"].

    Single pass over the text tracking quotes and parenthesis depth; a row
    ends each time depth returns to 0. Text between rows (commas, spaces,
    the closing ';') is ignored. A row left open at the end of the text is
    kept as-is.
    """
    rows = []
    cur = []
    depth = 0
    quote = None
    prev = ''
    for ch in s:
        if quote:
            cur.append(ch)
            if ch == quote and prev != '\\':
                quote = None
        elif depth == 0:
            if ch == '(':
                depth = 1
                cur = []
        elif ch in ("'", '"'):
            quote = ch
            cur.append(ch)
        elif ch == '(':
            depth += 1
            cur.append(ch)
        elif ch == ')':
            depth -= 1
            if depth == 0:
                rows.append(''.join(cur))
            else:
                cur.append(ch)
        else:
            cur.append(ch)
        prev = ch
    if depth > 0 and cur:
        rows.append(''.join(cur))
    return rows


def parse_insert_into(sql: str, skip_unparsable: bool = False) -> Optional[InsertInfo]:
    try:
        m = INSERT_INTO_RE.search(sql)
        if not m:
            return None
        table = strip_table_prefix(m.group(1))
        values = VALUES_RE.search(sql, m.end() - len('VALUES'))
        if not values:
            return None
        records = []
        for group in split_value_groups(values.group(1)):
            row = parse_values(group)
            if row:
                records.append(row)
        return {"tableName": table, "records": records}
    except Exception as e:
        if not skip_unparsable:
            print(f"Error parsing INSERT INTO: {e}", file=sys.stderr)
        return None
