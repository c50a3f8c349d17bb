"""
json_writer.py
Serialize a TableRegistry either as one combined document or as one file
per table plus _summary.json.
"""
import json
import os
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sql2json.models import TableInfo
from sql2json.registry import TableRegistry

SUMMARY_FILE = "_summary.json"


def generated_at() -> str:
    # 2024-01-31T12:00:00.000Z
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def table_file_name(table_name: str) -> str:
    return f"{table_name}.json"


def build_combined_document(registry: TableRegistry) -> Dict[str, Any]:
    return {
        "metadata": {
            "generatedAt": generated_at(),
            "totalTables": len(registry),
            "totalRecords": registry.total_records(),
        },
        "tables": registry.tables,
    }


def build_table_document(table: TableInfo) -> Dict[str, Any]:
    return {
        "tableName": table["tableName"],
        "columns": table["columns"],
        "recordCount": len(table["data"]),
        "generatedAt": generated_at(),
        "data": table["data"],
    }


def build_summary(registry: TableRegistry) -> Dict[str, Any]:
    return {
        "generatedAt": generated_at(),
        "totalTables": len(registry),
        "totalRecords": registry.total_records(),
        "tables": [
            {
                "name": t["tableName"],
                "recordCount": len(t["data"]),
                "fileName": table_file_name(t["tableName"]),
            }
            for t in registry
        ],
    }


def dumps(doc: Any) -> str:
    return json.dumps(doc, indent=2, ensure_ascii=False)


def write_json(path: str, doc: Any):
    with open(path, 'w', encoding='utf-8') as f:
        f.write(dumps(doc))


def write_combined_json(registry: TableRegistry, output_file: Optional[str] = None) -> Dict[str, Any]:
    """Write the combined document to output_file, or print it to stdout."""
    doc = build_combined_document(registry)
    if output_file:
        write_json(output_file, doc)
        print(f"Output written to {output_file}")
    else:
        print(dumps(doc))
    return doc


def write_separate_json_files(registry: TableRegistry, output_dir: str) -> int:
    """
    Write <tableName>.json for every table and a _summary.json listing
    them. Returns the number of table files written.
    """
    if not os.path.exists(output_dir):
        os.makedirs(output_dir, exist_ok=True)
        print(f"Created output directory: {output_dir}")

    files_written = 0
    for table in registry:
        path = os.path.join(output_dir, table_file_name(table["tableName"]))
        write_json(path, build_table_document(table))
        print(f"Wrote {path} ({len(table['data'])} records)")
        files_written += 1

    summary_path = os.path.join(output_dir, SUMMARY_FILE)
    write_json(summary_path, build_summary(registry))
    print(f"Wrote summary file: {summary_path}")
    print(f"Successfully wrote {files_written} table files + 1 summary file")
    return files_written
