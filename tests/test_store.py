# Copyright (c) 2026 PodaBio
# SPDX-License-Identifier: MIT

"""Tests for the SQLite theme store."""

import pytest

from podacolor.errors import ThemeStoreError
from podacolor.themes.store import ThemeStore


class TestFetch:

    def test_ordered_by_name_active_only(self, store):
        store.insert_theme("Zeta")
        store.insert_theme("Alpha")
        store.insert_theme("Retired", is_active=False)
        assert [t.name for t in store.fetch_themes()] == ["Alpha", "Zeta"]

    def test_include_inactive(self, store):
        store.insert_theme("Zeta")
        store.insert_theme("Retired", is_active=False)
        themes = store.fetch_themes(include_inactive=True)
        assert [t.name for t in themes] == ["Retired", "Zeta"]
        assert not themes[0].is_active

    def test_columns_decoded(self, store):
        theme_id = store.insert_theme("Night", page_background="#0f172a",
                                      shape_tokens='{"corner":{"md":"4px"}}')
        record = store.get_theme(theme_id)
        assert record.page_background == "#0f172a"
        assert record.shape_tokens == '{"corner":{"md":"4px"}}'
        assert record.typography_tokens is None

    def test_get_missing(self, store):
        assert store.get_theme(999) is None


class TestUpdate:

    def test_update_columns(self, store):
        theme_id = store.insert_theme("Night")
        store.update_theme(theme_id, {"page_background": "#000000", "shape_tokens": "{}"})
        record = store.get_theme(theme_id)
        assert record.page_background == "#000000"
        assert record.shape_tokens == "{}"

    def test_refuses_unknown_columns(self, store):
        theme_id = store.insert_theme("Night")
        with pytest.raises(ValueError, match="Refusing"):
            store.update_theme(theme_id, {"name": "Hacked"})

    def test_empty_update_is_noop(self, store):
        theme_id = store.insert_theme("Night")
        store.update_theme(theme_id, {})
        assert store.get_theme(theme_id).name == "Night"


class TestTransaction:

    def test_commit(self, db_path):
        with ThemeStore(db_path) as store:
            with store.transaction():
                store.insert_theme("Kept")
        with ThemeStore(db_path) as store:
            assert [t.name for t in store.fetch_themes()] == ["Kept"]

    def test_rollback_on_error(self, db_path):
        with ThemeStore(db_path) as store:
            with pytest.raises(RuntimeError):
                with store.transaction():
                    store.insert_theme("Lost")
                    raise RuntimeError("boom")
            assert store.fetch_themes() == []

    def test_rollback_when_not_committing(self, db_path):
        with ThemeStore(db_path) as store:
            with store.transaction(commit=False):
                store.insert_theme("Dry")
        with ThemeStore(db_path) as store:
            assert store.fetch_themes() == []


class TestErrors:

    def test_unopenable_path(self, tmp_path):
        with pytest.raises(ThemeStoreError, match="Cannot open"):
            ThemeStore(tmp_path / "missing" / "themes.db")

    def test_missing_table(self, tmp_path):
        with ThemeStore(tmp_path / "empty.db") as store:
            with pytest.raises(ThemeStoreError, match="Cannot read themes"):
                store.fetch_themes()
