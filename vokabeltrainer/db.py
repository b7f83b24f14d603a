"""SQLite storage for the four vocabulary practice tables."""

from __future__ import annotations

import sqlite3
import sys
import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from os import PathLike
from typing import Union

SPANISCH_DEUTSCH_ERSTER = "spanisch_deutsch_erster_versuch"
SPANISCH_DEUTSCH_ZWEITER = "spanisch_deutsch_zweiter_versuch"
DEUTSCH_SPANISCH_ERSTER = "deutsch_spanisch_erster_versuch"
DEUTSCH_SPANISCH_ZWEITER = "deutsch_spanisch_zweiter_versuch"

VALID_TABLES = (
    SPANISCH_DEUTSCH_ERSTER,
    SPANISCH_DEUTSCH_ZWEITER,
    DEUTSCH_SPANISCH_ERSTER,
    DEUTSCH_SPANISCH_ZWEITER,
)
_SPAN_DEUT_TABLES = frozenset({SPANISCH_DEUTSCH_ERSTER, SPANISCH_DEUTSCH_ZWEITER})

Word = tuple[int, str, str]
StrPath = Union[str, "PathLike[str]"]


class VokabelError(Exception):
    """Base error of the vocabulary database."""


class InvalidTableError(VokabelError, ValueError):
    """A table name is not one of the four practice tables."""

    def __init__(self, table: str) -> None:
        super().__init__(f"Fehler nicht valide table name: {table!r}")
        self.table = table


class EmptyTableError(VokabelError, LookupError):
    """No matching word was found."""

    def __init__(self) -> None:
        super().__init__("keine Vokabeln")


def is_valid_table(table: str) -> bool:
    """Return True if ``table`` is one of the practice tables."""
    return table in VALID_TABLES


def is_span_deut(table: str) -> bool:
    """Return True if ``table`` asks Spanish first and expects German."""
    return table in _SPAN_DEUT_TABLES


def _require_table(table: str) -> None:
    if not is_valid_table(table):
        raise InvalidTableError(table)


def _columns(table: str) -> tuple[str, str]:
    """Question and answer columns of a table."""
    return ("span", "deut") if is_span_deut(table) else ("deut", "span")


def _parse_csv(lines: Iterable[str]) -> Iterator[tuple[str, str]]:
    """Yield ``(span, deut)`` pairs; lines without both parts are skipped."""
    for raw in lines:
        line = raw.rstrip("\n")
        if not line:
            continue
        span, sep, deut = line.partition(";")
        if not sep or not deut:
            continue
        yield span, deut


class VokabelDB:
    """Vocabulary database backed by SQLite."""

    def __init__(self, path: StrPath) -> None:
        try:
            self._conn = sqlite3.connect(
                str(path), isolation_level=None, check_same_thread=False
            )
        except sqlite3.Error as exc:
            raise VokabelError("DB open failed") from exc
        self._lock = threading.RLock()

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()

    def __enter__(self) -> VokabelDB:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        self._conn.execute("BEGIN")
        try:
            yield self._conn
        except BaseException:
            self._conn.execute("ROLLBACK")
            raise
        self._conn.execute("COMMIT")

    def _execute(self, sql: str, params: tuple = ()) -> None:
        with self._lock:
            try:
                self._conn.execute(sql, params)
            except sqlite3.Error as exc:
                raise VokabelError(str(exc)) from exc

    def _fetch_one(self, sql: str, params: tuple = ()) -> tuple:
        with self._lock:
            try:
                row = self._conn.execute(sql, params).fetchone()
            except sqlite3.Error as exc:
                raise EmptyTableError() from exc
        if row is None:
            raise EmptyTableError()
        return row

    def count(self, table: str) -> int:
        """Number of words left in ``table``; 0 if the table does not exist yet."""
        _require_table(table)
        with self._lock:
            try:
                row = self._conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()
            except sqlite3.OperationalError:
                return 0
        return int(row[0])

    def next(self, table: str) -> Word:
        """A random word from ``table`` as ``(id, question, answer)``."""
        _require_table(table)
        question, answer = _columns(table)
        row = self._fetch_one(
            f"SELECT id, {question}, {answer} FROM {table} ORDER BY RANDOM() LIMIT 1"
        )
        return int(row[0]), row[1], row[2]

    def next_where(self, table: str, word_id: int) -> Word:
        """The word with ``word_id`` in ``table`` as ``(id, question, answer)``."""
        _require_table(table)
        question, answer = _columns(table)
        row = self._fetch_one(
            f"SELECT {question}, {answer} FROM {table} WHERE id = ?", (word_id,)
        )
        return word_id, row[0], row[1]

    def move_word(self, source: str, target: str, word_id: int) -> None:
        """Move the word ``word_id`` from ``source`` into ``target``."""
        _require_table(source)
        _require_table(target)
        with self._lock:
            _, question, answer = self.next_where(source, word_id)
            values = dict(zip(_columns(source), (question, answer)))
            try:
                with self._transaction() as conn:
                    conn.execute(
                        f"INSERT INTO {target} (span, deut) VALUES (?, ?)",
                        (values["span"], values["deut"]),
                    )
                    conn.execute(f"DELETE FROM {source} WHERE id = ?", (word_id,))
            except sqlite3.Error as exc:
                raise VokabelError(str(exc)) from exc

    def delete_word(self, table: str, word_id: int) -> None:
        """Remove the word ``word_id`` from ``table``."""
        _require_table(table)
        self._execute(f"DELETE FROM {table} WHERE id = ?", (word_id,))

    def create_table(self, table: str, span_first: bool) -> None:
        """Create ``table`` unless it exists already."""
        first, second = ("span", "deut") if span_first else ("deut", "span")
        try:
            _require_table(table)
            self._execute(
                f"CREATE TABLE IF NOT EXISTS {table} ("
                "  id   INTEGER PRIMARY KEY AUTOINCREMENT,"
                f"  {first} TEXT    NOT NULL,"
                f"  {second} TEXT    NOT NULL);"
            )
        except VokabelError as exc:
            raise VokabelError("Fehler beim Anlegen der Tabelle") from exc

    def create_database_from_csv(self, csv_path: StrPath) -> int:
        """Create all tables and load ``span;deut`` lines into the first one.

        Returns the number of words inserted.
        """
        print("[+] create tables")
        for table in VALID_TABLES:
            self.create_table(table, is_span_deut(table))

        with self._lock:
            print("[+] begin transaction")
            try:
                self._conn.execute("BEGIN")
            except sqlite3.Error as exc:
                raise VokabelError(f"Konnte Transaktion nicht starten: {exc}") from exc

            inserted = 0
            try:
                print("[+] prepare insert statement")
                insert_sql = (
                    f"INSERT INTO {SPANISCH_DEUTSCH_ERSTER} (span, deut) VALUES (?, ?);"
                )
                print("[+] open csv file")
                try:
                    handle = open(csv_path, encoding="utf-8")
                except OSError as exc:
                    raise VokabelError(
                        f"Konnte CSV-Datei nicht öffnen: {csv_path}"
                    ) from exc

                print("[+] insert words ....")
                with handle:
                    for span, deut in _parse_csv(handle):
                        print(f"{span} :  {deut}")
                        try:
                            self._conn.execute(insert_sql, (span, deut))
                        except sqlite3.Error as exc:
                            print(
                                f"Warnung: Insert fehlgeschlagen für '{span};{deut}': {exc}",
                                file=sys.stderr,
                            )
                        else:
                            inserted += 1
                print("[+] insertion loop is ok")
            except BaseException:
                self._conn.execute("ROLLBACK")
                raise

            try:
                self._conn.execute("COMMIT")
            except sqlite3.Error as exc:
                raise VokabelError(
                    f"Konnte Transaktion nicht abschließen: {exc}"
                ) from exc
        print("[+] commit done")
        return inserted