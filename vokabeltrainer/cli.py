"""Command line entry point: import a CSV file or start the web server."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

from .db import VokabelDB, VokabelError
from .server import run_server

DB_PATH = Path("db") / "vokabeln.db"
PROG = "vokabeltrainer"


def _print_usage() -> None:
    err = sys.stderr
    print(f"Usage: {PROG} -c dateiname.csv", file=err)
    print("      for fill csv-vocabels in db/vokabeln.db\n", file=err)
    print(f"Usage: {PROG}", file=err)
    print("      to start http-server ->  http://localhost:8080/\n", file=err)


def _import_csv(db: VokabelDB, csv_file: str) -> int:
    print(f"[+] start to create database {DB_PATH.as_posix()}")
    try:
        db.create_database_from_csv(csv_file)
    except (VokabelError, OSError) as exc:
        print(f"Fehler: {exc}", file=sys.stderr)
        return 1
    print(f"Datenbank '{DB_PATH.as_posix()}' erfolgreich angelegt und befüllt.")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program; returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)

    print("[+] start")
    try:
        db = VokabelDB(DB_PATH)
    except VokabelError as exc:
        print(f"Fehler: {exc}", file=sys.stderr)
        return 1

    with db:
        print("[+] prepare options")
        print(f"[+] argc: {len(args) + 1}")

        if len(args) == 2 and args[0] == "-c":
            return _import_csv(db, args[1])
        if args:
            _print_usage()
            return 1

        print("[+] start server")
        print("[+] listen on http://localhost:8080/")
        run_server(db)
        return 0


if __name__ == "__main__":
    raise SystemExit(main())