"""
Main entry point for the fileio SQL runner.

Usage:
    python -m fileio_app "select writefile('a/b.txt', 'hi')"
    python -m fileio_app --db data.db "select lsmode(493)" "select readfile('a/b.txt')"
    fileio-sql  (if installed)
"""

import argparse
import logging
import os
import sqlite3
import sys
from pathlib import Path
from typing import Iterable, Optional, Sequence

# Ensure src is in path for development
src_path = Path(__file__).parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from fileio_core.adapters.sqlite_functions import register_functions
from fileio_core.config import FileIOConfig, parse_octal


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fileio-sql",
        description="Run SQL statements with readfile/writefile/mkdir/symlink/lsmode available",
    )
    parser.add_argument("sql", nargs="+", help="SQL statement(s) to execute, in order")
    parser.add_argument("--db", default=":memory:",
                        help="Database file to open (default: in-memory)")
    parser.add_argument("--umask", type=parse_octal,
                        help="Octal umask for created directories (default: process umask)")
    parser.add_argument("--max-blob-size", type=int,
                        help="Cap readfile() results at this many bytes")
    parser.add_argument("--raw", action="store_true",
                        help="Write blob results to stdout as-is instead of [N bytes]")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Log filesystem activity (-v info, -vv debug)")
    return parser


def setup_logging(verbosity: int):
    """Configure root logging from -v flags or FILEIO_LOG_LEVEL."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = getattr(logging, os.environ.get("FILEIO_LOG_LEVEL", "WARNING").upper(),
                        logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )


def format_value(value, raw: bool = False) -> str:
    """Render one column value for tab-separated output."""
    if value is None:
        return "NULL"
    if isinstance(value, bytes):
        if raw:
            return value.decode("utf-8", errors="replace")
        return f"[{len(value)} bytes]"
    return str(value)


def run_statements(conn: sqlite3.Connection, statements: Iterable[str],
                   raw: bool = False, out=None) -> int:
    """Execute statements in order, printing rows. Returns the row count."""
    out = out or sys.stdout
    rows_printed = 0
    for sql in statements:
        for row in conn.execute(sql):
            print("\t".join(format_value(v, raw) for v in row), file=out)
            rows_printed += 1
    return rows_printed


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, open the database and run the statements."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    config = FileIOConfig.from_env()
    if args.umask is not None:
        config.umask = args.umask
    if args.max_blob_size is not None:
        config.max_blob_size = args.max_blob_size

    conn = sqlite3.connect(args.db, isolation_level=None)  # Autocommit mode
    try:
        register_functions(conn, config=config)
        run_statements(conn, args.sql, raw=args.raw)
    except sqlite3.Error as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        conn.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
