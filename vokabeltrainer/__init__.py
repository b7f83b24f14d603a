"""Spanish-German vocabulary trainer: a SQLite word store, a Flask JSON API and a command."""

__version__ = "0.1.0"