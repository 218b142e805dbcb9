"""Small worked examples: a linked list, a bit grid, packed dates, comment stripping, log parsing, key/value files and SQLite helpers."""

__version__ = "0.1.0"