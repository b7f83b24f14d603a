"""HTTP interface for practising vocabulary."""

from __future__ import annotations

import os
from typing import Optional

from flask import Flask, jsonify, request

from .db import (
    DEUTSCH_SPANISCH_ERSTER,
    DEUTSCH_SPANISCH_ZWEITER,
    SPANISCH_DEUTSCH_ERSTER,
    SPANISCH_DEUTSCH_ZWEITER,
    InvalidTableError,
    VokabelDB,
    VokabelError,
)

DEFAULT_STATIC_FOLDER = "static"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080

_NEXT_TABLE: dict[str, Optional[str]] = {
    SPANISCH_DEUTSCH_ERSTER: SPANISCH_DEUTSCH_ZWEITER,
    SPANISCH_DEUTSCH_ZWEITER: DEUTSCH_SPANISCH_ERSTER,
    DEUTSCH_SPANISCH_ERSTER: DEUTSCH_SPANISCH_ZWEITER,
    DEUTSCH_SPANISCH_ZWEITER: None,
}


def next_table(table: str) -> Optional[str]:
    """Table a correctly answered word moves to; None after the last one."""
    try:
        return _NEXT_TABLE[table]
    except KeyError:
        raise InvalidTableError(table) from None


def _as_str(value: object) -> str:
    return "" if value is None else str(value)


def create_app(db: VokabelDB, static_folder: str = DEFAULT_STATIC_FOLDER) -> Flask:
    """Build the web application serving ``static_folder`` and the JSON API."""
    app = Flask(
        __name__,
        static_folder=os.path.abspath(static_folder),
        static_url_path="",
    )

    @app.errorhandler(VokabelError)
    def _vokabel_error(exc: VokabelError):
        return jsonify(error=str(exc)), 500

    @app.get("/")
    def index():
        return app.send_static_file("index.html")

    @app.get("/api/count")
    def count():
        return jsonify(count=db.count(request.args.get("table", "")))

    @app.get("/api/next")
    def next_word():
        try:
            word_id, question, answer = db.next(request.args.get("table", ""))
        except VokabelError:
            return jsonify(error="leer"), 404
        return jsonify(id=word_id, frage=question, antwort=answer)

    @app.post("/api/answer")
    def answer():
        body = request.get_json(force=True, silent=True)
        if not isinstance(body, dict):
            return jsonify(error="invalid_json"), 400
        try:
            table = _as_str(body.get("table"))
            word_id = int(body.get("id") or 0)
            correct = bool(body.get("correct", False))
        except (TypeError, ValueError):
            return jsonify(error="invalid_json"), 400

        # A wrong answer leaves the word where it is.
        if correct:
            target = next_table(table)
            if target:
                db.move_word(table, target, word_id)
            else:
                db.delete_word(table, word_id)
        return jsonify(ok=True)

    return app


def run_server(
    db: VokabelDB,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    static_folder: str = DEFAULT_STATIC_FOLDER,
) -> None:
    """Serve the application until interrupted."""
    create_app(db, static_folder).run(host=host, port=port)