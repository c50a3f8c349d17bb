"""
ddl_to_schema.py
Turn a single CREATE TABLE statement into a table entry:
{"tableName": ..., "columns": [{"name": ..., "type": ...}, ...], "data": []}

The column list is taken between the first '(' and the last ')' of the
statement and split on top-level commas, so DECIMAL(10,2) and similar types
stay in one piece. Index and key lines are skipped.
"""

import re
import sys
from typing import List, Optional

from sql2json.models import ColumnDefinition, TableInfo, strip_table_prefix

CREATE_TABLE_RE = re.compile(
    r'CREATE\s+TABLE\s+(?:IF\s+NOT\s+EXISTS\s+)?[`"]?([^`"\s(]+)[`"]?\s*\(',
    flags=re.I,
)
COLUMN_RE = re.compile(r'^(?:`([^`]+)`|"([^"]+)"|(\S+))\s+(.+)$', flags=re.S)

# table-level definitions that do not describe a column
SKIPPED_RE = re.compile(
    r'^(primary\s+key|key\b|unique\b|foreign\s+key|constraint\b|check\b|index\b|fulltext\b|spatial\b)',
    flags=re.I,
)


# Helpers ---------------------------------------------------------
def extract_table_name(sql: str) -> Optional[str]:
    m = CREATE_TABLE_RE.search(sql)
    if not m:
        return None
    return strip_table_prefix(m.group(1))


def columns_block(sql: str) -> Optional[str]:
    """
    Text between the first '(' and the last ')' of the statement, or None
    when either is missing.
    """
    start = sql.find('(')
    end = sql.rfind(')')
    if start == -1 or end == -1 or end < start:
        return None
    return sql[start + 1:end]


def split_top_level_commas(s: str) -> List[str]:
    """
    Split string s by commas that are at top-level (not inside parentheses
    or quotes). Returns list of parts (trimmed), empty parts dropped.
    """
    parts = []
    cur = []
    depth = 0
    quote = None
    escaped = False
    for ch in s:
        if quote:
            cur.append(ch)
            if escaped:
                escaped = False
            elif ch == '\\':
                escaped = True
            elif ch == quote:
                quote = None
        elif ch in ("'", '"', '`'):
            quote = ch
            cur.append(ch)
        elif ch == '(':
            depth += 1
            cur.append(ch)
        elif ch == ')':
            depth -= 1
            cur.append(ch)
        elif ch == ',' and depth == 0:
            part = ''.join(cur).strip()
            if part:
                parts.append(part)
            cur = []
        else:
            cur.append(ch)
    last = ''.join(cur).strip()
    if last:
        parts.append(last)
    return parts


def is_column_definition(col_def: str) -> bool:
    s = col_def.strip()
    if not s or s.startswith('--'):
        return False
    if SKIPPED_RE.match(s):
        return False
    return 'ENGINE=' not in s.upper()


def parse_column_definition(col_def: str) -> Optional[ColumnDefinition]:
    """
    Given a column definition, return {"name", "type"} where type is the
    rest of the declaration verbatim (constraints included).
    """
    s = col_def.strip()
    if not is_column_definition(s):
        return None
    m = COLUMN_RE.match(s)
    if not m:
        return None
    name = m.group(1) or m.group(2) or m.group(3)
    col_type = m.group(4).strip()
    if col_type.endswith(','):
        col_type = col_type[:-1].rstrip()
    return {"name": name, "type": col_type}


# Main ------------------------------------------------------------
def parse_create_table(sql: str, skip_unparsable: bool = False) -> Optional[TableInfo]:
    try:
        table = extract_table_name(sql)
        if table is None:
            return None
        block = columns_block(sql)
        if block is None:
            return None
        columns = []
        for part in split_top_level_commas(block):
            col = parse_column_definition(part)
            if col:
                columns.append(col)
        return {"tableName": table, "columns": columns, "data": []}
    except Exception as e:
        if not skip_unparsable:
            print(f"Error parsing CREATE TABLE: {e}", file=sys.stderr)
        return None
