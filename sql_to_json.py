#!/usr/bin/env python3
"""
sql_to_json.py - Convert a SQL dump to JSON

Usage:
  python sql_to_json.py input_dump.sql [--separate | --combined] [--output result.json]
                        [--output-dir json-output] [--memory] [--limit N] [--skip-unparsable]

Modes:
  --separate (default): one <table>.json per table plus _summary.json in --output-dir
  --combined: a single document written to --output, or printed to stdout

Files over 10 MB, or runs with --memory / --limit, are streamed line by line;
smaller files are parsed in memory.

Exits non-zero when the input is missing or the conversion fails.
"""
import argparse
import os
import sys
import traceback

from sql2json import __version__
from sql2json.config import DEFAULT_BATCH_SIZE, DEFAULT_OUT_DIR, LARGE_FILE_MB, ConverterOptions
from sql2json.converter import SQLToJSONConverter
from sql2json.json_writer import dumps


def build_parser():
    p = argparse.ArgumentParser(description="Convert SQL dump (CREATE TABLE / INSERT INTO) to JSON")
    p.add_argument("sql_file", help="Input .sql dump file")
    p.add_argument("--output", help="Output file for combined mode (default: stdout)")
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("--separate", dest="combined", action="store_false", help="Export one file per table (default)")
    mode.add_argument("--combined", dest="combined", action="store_true", help="Export a single combined file")
    p.add_argument("--output-dir", default=DEFAULT_OUT_DIR, help="Output directory for separate mode")
    p.add_argument("-m", "--memory", action="store_true", help="Show memory usage")
    p.add_argument("--batch-size", type=int, default=DEFAULT_BATCH_SIZE, help="Batch size")
    p.add_argument("--limit", type=int, default=None, help="Stop after this many statements")
    p.add_argument("--skip-unparsable", action="store_true", help="Do not report unparsable statements")
    p.add_argument("-v", "--version", action="version", version=__version__)
    p.set_defaults(combined=False)
    return p


def run(args) -> int:
    if not os.path.exists(args.sql_file):
        print(f"File not found: {args.sql_file}", file=sys.stderr)
        return 1

    size_mb = os.path.getsize(args.sql_file) / (1024 * 1024)
    # status lines go to stderr when the JSON itself is printed
    log = sys.stderr if args.combined and not args.output else sys.stdout
    print(f"File size: {size_mb:.2f} MB", file=log)

    options = ConverterOptions(
        batch_size=args.batch_size,
        show_memory=args.memory,
        limit=args.limit,
        skip_unparsable=args.skip_unparsable,
        output_mode='combined' if args.combined else 'separate',
        output_dir=args.output_dir,
    )
    converter = SQLToJSONConverter(options)

    if size_mb > LARGE_FILE_MB or args.memory or args.limit:
        print("Large file detected. Using stream processing...", file=log)
        converter.process_large_sql(args.sql_file, args.output)
        return 0

    print("Small file detected. Using in-memory parsing...", file=log)
    with open(args.sql_file, 'r', encoding='utf-8', errors='replace') as f:
        content = f.read()
    if args.combined:
        result = converter.sql_to_json(content)
        if args.output:
            with open(args.output, 'w', encoding='utf-8') as f:
                f.write(dumps(result))
            print(f"Result written to {args.output}")
        else:
            print(dumps(result))
    else:
        converter.sql_to_json_files(content, args.output_dir)
    return 0


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        code = run(args)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        traceback.print_exc()
        code = 1
    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
