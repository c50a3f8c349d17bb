"""
converter.py - drive the statement parser over a whole dump

Two ways in:
  - sql_to_json / sql_to_json_files: the dump is already in memory, split
    into statements at once.
  - process_large_sql: the dump is read line by line and statements are
    processed as soon as they are complete.
"""
import sys
import time
from dataclasses import replace
from typing import Any, Dict, Optional

from sql2json.config import PROGRESS_EVERY_LINES, ConverterOptions
from sql2json.json_writer import (build_combined_document, generated_at,
                                  write_combined_json, write_separate_json_files)
from sql2json.memory import log_memory_usage
from sql2json.models import ParserState
from sql2json.registry import TableRegistry
from sql2json.statement_parser import parse_statement
from sql2json.statement_reader import BOM, iter_statements, split_statements


class SQLToJSONConverter:
    """Holds the registry and parser state for one conversion run."""

    def __init__(self, options: Optional[ConverterOptions] = None):
        self.options = options or ConverterOptions()
        self.registry = TableRegistry()
        self.state = ParserState()

    @property
    def tables(self):
        return self.registry.tables

    def reset(self):
        self.registry.reset()
        self.state.reset()

    def process_statement(self, sql: str) -> bool:
        return parse_statement(sql, self.state, self.registry,
                               limit=self.options.limit,
                               skip_unparsable=self.options.skip_unparsable)

    def _process_all(self, content: str):
        for statement in split_statements(content):
            if not self.process_statement(statement):
                break

    # ---------- in-memory ----------
    def sql_to_json(self, content: str) -> Dict[str, Any]:
        self._process_all(content)
        return build_combined_document(self.registry)

    def sql_to_json_files(self, content: str, output_dir: Optional[str] = None) -> Dict[str, Any]:
        out_dir = output_dir or self.options.output_dir
        self._process_all(content)
        write_separate_json_files(self.registry, out_dir)
        return {
            "metadata": {
                "generatedAt": generated_at(),
                "totalTables": len(self.registry),
                "totalRecords": self.registry.total_records(),
                "outputDirectory": out_dir,
            },
            "tables": self.registry.table_names(),
        }

    # ---------- streaming ----------
    def process_large_sql(self, input_file: str, output_file: Optional[str] = None):
        opts = self.options
        separate = opts.output_mode == 'separate'
        # keep stdout clean when the combined JSON itself goes to stdout
        log = sys.stdout if separate or output_file else sys.stderr

        print("Starting SQL to JSON conversion...", file=log)
        print(f"Input: {input_file}", file=log)
        if separate:
            print(f"Output directory: {opts.output_dir}/", file=log)
        else:
            print(f"Output: {output_file or 'stdout'}", file=log)
        print(f"Batch size: {opts.batch_size}", file=log)
        if opts.limit:
            print(f"Limit: {opts.limit} statements", file=log)

        line_count = 0
        start = time.time()

        def counted(f):
            nonlocal line_count
            for line in f:
                line_count += 1
                if line_count == 1 and line.startswith(BOM):
                    line = line[1:]
                if line_count % PROGRESS_EVERY_LINES == 0:
                    print(f"Processed {line_count} lines, {self.state.processed_statements} statements, "
                          f"{len(self.registry)} tables", file=log)
                    log_memory_usage(opts.show_memory, file=log)
                yield line

        with open(input_file, 'r', encoding='utf-8', errors='replace') as f:
            for statement in iter_statements(counted(f)):
                if not self.process_statement(statement):
                    print("Reached processing limit", file=log)
                    break

        duration = time.time() - start
        print(f"Conversion completed in {duration:.2f}s", file=log)
        print("Final stats:", file=log)
        print(f"   - Lines processed: {line_count}", file=log)
        print(f"   - Statements processed: {self.state.processed_statements}", file=log)
        print(f"   - Tables found: {len(self.registry)}", file=log)
        for table in self.registry:
            print(f"   - {table['tableName']}: {len(table['data'])} records", file=log)
        log_memory_usage(opts.show_memory, file=log)

        if separate:
            write_separate_json_files(self.registry, opts.output_dir)
        else:
            write_combined_json(self.registry, output_file)


# Library helpers -------------------------------------------------
def create_converter(options: Optional[ConverterOptions] = None) -> SQLToJSONConverter:
    return SQLToJSONConverter(options)


def sql_to_json(content: str, options: Optional[ConverterOptions] = None) -> Dict[str, Any]:
    return SQLToJSONConverter(options).sql_to_json(content)


def sql_to_json_files(content: str, output_dir: str = 'json-output',
                      options: Optional[ConverterOptions] = None) -> Dict[str, Any]:
    opts = replace(options or ConverterOptions(), output_mode='separate', output_dir=output_dir)
    converter = SQLToJSONConverter(opts)
    return converter.sql_to_json_files(content, output_dir)


def process_large_sql(input_file: str, output_file: Optional[str] = None,
                      options: Optional[ConverterOptions] = None):
    SQLToJSONConverter(options).process_large_sql(input_file, output_file)
