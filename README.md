# vokabeltrainer

A small Spanish–German vocabulary trainer. The words are kept in a SQLite
database. A JSON HTTP API serves them to a web page.

Every word passes through four practice tables in this order:

1. `spanisch_deutsch_erster_versuch`: Spanish → German, first attempt
2. `spanisch_deutsch_zweiter_versuch`: Spanish → German, second attempt
3. `deutsch_spanisch_erster_versuch`: German → Spanish, first attempt
4. `deutsch_spanisch_zweiter_versuch`: German → Spanish, second attempt

A correct answer moves the word on to the next table. A correct answer in the
last table removes the word. A wrong answer leaves the word where it is.

## Installation

```
pip install .
```

## The command

The `vokabeltrainer` command always opens the database `db/vokabeln.db`,
relative to the current working directory. The `db/` directory must already
exist. If it does not, the command prints `Fehler: DB open failed` and exits
with status 1.

### Filling the database

Prepare a UTF-8 text file with one word pair per line. Put the Spanish word
first and the German word second, separated by a semicolon:

```
hola;hallo
gracias;danke
```

Then load it:

```
vokabeltrainer -c vokabeln.csv
```

The command creates the four tables if they are missing. It then inserts
every pair into `spanisch_deutsch_erster_versuch` in a single transaction.
Empty lines are skipped, and so are lines without a semicolon or without text
after it. Each inserted pair is printed as it goes in. If the file cannot be
opened, the command reports the error and exits with status 1.

### Running the server

```
vokabeltrainer
```

With no arguments the command starts the HTTP server on `0.0.0.0:8080`. Any
other combination of arguments prints the usage text and exits with status 1.

The server serves static files from the directory `static` in the current
working directory, at the root of the site. `GET /` returns `static/index.html`.

### API

- `GET /api/count?table=<table>` returns `{"count": n}`. A table that has not
  been created yet counts as 0.
- `GET /api/next?table=<table>` returns a random word from the table as
  `{"id": ..., "frage": ..., "antwort": ...}`. `frage` holds the word in the
  language the table asks in, and `antwort` holds the expected answer. If the
  table is empty or unknown, it returns status 404 with `{"error": "leer"}`.
- `POST /api/answer` takes `{"table": ..., "id": ..., "correct": true|false}`
  and returns `{"ok": true}`. A body that is not a JSON object returns status
  400 with `{"error": "invalid_json"}`.

Any other database error, such as an unknown table name passed to
`/api/count`, returns status 500 with `{"error": "<message>"}`.

## Using it from Python

```python
from vokabeltrainer.db import VokabelDB, SPANISCH_DEUTSCH_ERSTER, SPANISCH_DEUTSCH_ZWEITER
from vokabeltrainer.server import create_app, next_table

with VokabelDB("vokabeln.db") as db:
    inserted = db.create_database_from_csv("vokabeln.csv")
    word_id, question, answer = db.next(SPANISCH_DEUTSCH_ERSTER)
    db.move_word(SPANISCH_DEUTSCH_ERSTER, next_table(SPANISCH_DEUTSCH_ERSTER), word_id)
    print(db.count(SPANISCH_DEUTSCH_ZWEITER))
    app = create_app(db, static_folder="static")
```

`vokabeltrainer.db` provides:

- `VokabelDB(path)`: a database connection, also usable as a context manager.
  Its methods are `count`, `next`, `next_where`, `move_word`, `delete_word`,
  `create_table`, `create_database_from_csv` and `close`.
- `is_valid_table(table)` and `is_span_deut(table)`.
- The errors `VokabelError`, `InvalidTableError` (an unknown table name) and
  `EmptyTableError` (no matching word).

`vokabeltrainer.server` provides `next_table(table)`, `create_app(db,
static_folder)`, which returns a Flask application, and `run_server(db, host,
port, static_folder)`.

## What the package does not include

The package has no web page of its own. The server delivers whatever files
sit in the `static` directory, and `GET /` only works if you provide
`static/index.html` yourself. Without such a page you use the trainer through
the JSON API alone.