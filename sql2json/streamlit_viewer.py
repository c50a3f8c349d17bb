# streamlit_viewer.py
# Browse the output of a separate-mode run: streamlit run sql2json/streamlit_viewer.py
import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import streamlit as st

from sql2json.config import DEFAULT_OUT_DIR
from sql2json.json_writer import SUMMARY_FILE

PREVIEW_ROWS = 200


# ---------- Utility functions ----------
def read_json(path: str) -> Optional[Any]:
    if not os.path.exists(path):
        return None
    with open(path, 'r', encoding='utf8') as f:
        try:
            return json.load(f)
        except json.JSONDecodeError:
            return None


def read_summary(out_dir: str) -> Dict[str, Any]:
    summary = read_json(os.path.join(out_dir, SUMMARY_FILE))
    if not isinstance(summary, dict):
        return {"totalTables": 0, "totalRecords": 0, "tables": []}
    return summary


def read_table(out_dir: str, file_name: str) -> Optional[Dict[str, Any]]:
    doc = read_json(os.path.join(out_dir, file_name))
    return doc if isinstance(doc, dict) else None


def filter_tables(entries: List[Dict[str, Any]], search: str) -> List[Dict[str, Any]]:
    if not search:
        return list(entries)
    q = search.lower()
    return [e for e in entries if q in e.get("name", "").lower()]


def table_rows(table_doc: Dict[str, Any], limit: int = PREVIEW_ROWS) -> List[Dict[str, Any]]:
    """
    Rows for the preview grid: every row gets every column key (missing
    trailing values show as None) and at most `limit` rows are returned.
    """
    names = [c["name"] for c in table_doc.get("columns", [])]
    rows = []
    for record in table_doc.get("data", [])[:limit]:
        rows.append({n: record.get(n) for n in names})
    return rows


# ---------- File I/O (cached) ----------
@st.cache_data
def load_summary(out_dir: str) -> Dict[str, Any]:
    return read_summary(out_dir)


@st.cache_data
def load_table(out_dir: str, file_name: str) -> Optional[Dict[str, Any]]:
    return read_table(out_dir, file_name)


# ---------- Streamlit UI ----------
def main():
    try:
        st.set_page_config(page_title="SQL to JSON Viewer", layout="wide")
    except Exception:
        pass
    st.title("SQL to JSON Viewer")

    if "out_dir" not in st.session_state:
        st.session_state.out_dir = DEFAULT_OUT_DIR

    with st.sidebar:
        st.subheader("Configuration")
        custom_out_dir = st.text_input("Output directory", value=st.session_state.out_dir,
                                       help="Directory written by sql_to_json.py --separate", key="out_dir_sidebar")
        if custom_out_dir and custom_out_dir.strip():
            st.session_state.out_dir = str(Path(custom_out_dir.strip()).resolve())
        if st.button("Reload"):
            load_summary.clear()
            load_table.clear()

    out_dir = st.session_state.out_dir
    summary = load_summary(out_dir)
    if not summary["tables"]:
        st.error(f"No {SUMMARY_FILE} found in {out_dir}")
        st.info(f"Run: `python sql_to_json.py <sql_file> --separate --output-dir {out_dir}`")
        return

    c1, c2 = st.columns(2)
    c1.metric("Tables", summary.get("totalTables", 0))
    c2.metric("Records", summary.get("totalRecords", 0))

    col1, col2 = st.columns([2, 5])
    with col1:
        st.subheader("Select Table")
        search_q = st.text_input("Find table (type substring)", key="table_search")
        candidates = filter_tables(summary["tables"], search_q)
        labels = [f"{e['name']} ({e['recordCount']})" for e in candidates]
        choice = st.selectbox("Table", options=labels or ["<no tables found>"], key="table_select")

    with col2:
        if not candidates:
            st.info("No table matches the search.")
            return
        entry = candidates[labels.index(choice)]
        table_doc = load_table(out_dir, entry["fileName"])
        if table_doc is None:
            st.error(f"{entry['fileName']} is missing or not valid JSON")
            return
        st.subheader(table_doc["tableName"])
        st.write("Columns:")
        st.table(table_doc.get("columns", []))
        st.write(f"First {min(PREVIEW_ROWS, table_doc.get('recordCount', 0))} of {table_doc.get('recordCount', 0)} records:")
        st.dataframe(table_rows(table_doc))


if __name__ == "__main__":
    main()
