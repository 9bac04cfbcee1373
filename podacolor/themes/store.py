# Copyright (c) 2026 PodaBio
# SPDX-License-Identifier: MIT

"""SQLite access to stored themes, with one transaction per run."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Mapping

from podacolor.errors import ThemeStoreError
from podacolor.schema import BACKGROUND_COLUMNS, TOKEN_COLUMNS, ThemeRecord

# Columns the normalizer is allowed to write
WRITABLE_COLUMNS = frozenset(TOKEN_COLUMNS + BACKGROUND_COLUMNS)

SCHEMA = """
CREATE TABLE IF NOT EXISTS themes (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    is_active INTEGER NOT NULL DEFAULT 1,
    page_background TEXT,
    widget_background TEXT,
    color_tokens TEXT,
    typography_tokens TEXT,
    shape_tokens TEXT,
    iconography_tokens TEXT
);
"""


class ThemeStore:
    """Theme table access over a persistent SQLite connection.

    Use as a context manager or call close() explicitly::

        with ThemeStore(path) as store:
            with store.transaction():
                for theme in store.fetch_themes():
                    ...

    All sqlite3 errors surface as ThemeStoreError.
    """

    def __init__(self, db_path: Path | str, *, create: bool = False) -> None:
        self.db_path = Path(db_path)
        try:
            self._conn = sqlite3.connect(str(self.db_path), timeout=10)
            self._conn.row_factory = sqlite3.Row
            if create:
                self._conn.executescript(SCHEMA)
                self._conn.commit()
        except sqlite3.Error as e:
            raise ThemeStoreError(f"Cannot open {self.db_path}: {e}") from e

    def __enter__(self) -> ThemeStore:
        return self

    def __exit__(self, exc_type: type | None, exc_val: BaseException | None,
                 exc_tb: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the database connection."""
        if self._conn:
            self._conn.close()
            self._conn = None

    @contextmanager
    def transaction(self, *, commit: bool = True) -> Generator[ThemeStore, None, None]:
        """Commit on success (or roll back if ``commit`` is False); roll back on error."""
        try:
            yield self
        except BaseException:
            self._conn.rollback()
            raise
        try:
            if commit:
                self._conn.commit()
            else:
                self._conn.rollback()
        except sqlite3.Error as e:
            raise ThemeStoreError(f"Cannot finish transaction: {e}") from e

    # --- Themes ---

    def fetch_themes(self, *, include_inactive: bool = False) -> list[ThemeRecord]:
        """Themes ordered by name; active ones only unless asked otherwise."""
        sql = "SELECT * FROM themes"
        if not include_inactive:
            sql += " WHERE is_active = 1"
        sql += " ORDER BY name ASC"
        try:
            rows = self._conn.execute(sql).fetchall()
        except sqlite3.Error as e:
            raise ThemeStoreError(f"Cannot read themes: {e}") from e
        return [ThemeRecord.from_row(row) for row in rows]

    def get_theme(self, theme_id: int) -> ThemeRecord | None:
        try:
            row = self._conn.execute(
                "SELECT * FROM themes WHERE id = ?", (theme_id,)
            ).fetchone()
        except sqlite3.Error as e:
            raise ThemeStoreError(f"Cannot read theme {theme_id}: {e}") from e
        return ThemeRecord.from_row(row) if row else None

    def insert_theme(self, name: str, *, is_active: bool = True,
                     **columns: str | None) -> int:
        """Insert a theme row and return its id."""
        unknown = set(columns) - WRITABLE_COLUMNS
        if unknown:
            raise ValueError(f"Unknown theme columns: {sorted(unknown)}")
        names = ["name", "is_active", *columns]
        placeholders = ", ".join("?" for _ in names)
        try:
            cur = self._conn.execute(
                f"INSERT INTO themes ({', '.join(names)}) VALUES ({placeholders})",
                (name, int(is_active), *columns.values()),
            )
        except sqlite3.Error as e:
            raise ThemeStoreError(f"Cannot insert theme {name!r}: {e}") from e
        return cur.lastrowid

    def update_theme(self, theme_id: int, updates: Mapping[str, str]) -> None:
        """``UPDATE themes SET <column> = ?, ... WHERE id = ?`` for changed columns."""
        if not updates:
            return
        unknown = set(updates) - WRITABLE_COLUMNS
        if unknown:
            raise ValueError(f"Refusing to write columns: {sorted(unknown)}")
        assignments = ", ".join(f"{column} = ?" for column in updates)
        try:
            self._conn.execute(
                f"UPDATE themes SET {assignments} WHERE id = ?",
                (*updates.values(), theme_id),
            )
        except sqlite3.Error as e:
            raise ThemeStoreError(f"Cannot update theme {theme_id}: {e}") from e
