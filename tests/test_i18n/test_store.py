"""Tests for the locale store: merging, caching and reload-while-empty."""

import copy
import threading
import time

from lessonlab.i18n.sources import StaticBundleSource
from lessonlab.i18n.store import TranslationStore, lookup, merge_bundle


class CountingSource:
    def __init__(self, bundles, delay=0.0):
        self.bundles = bundles
        self.delay = delay
        self.calls = []

    def __call__(self, locale):
        self.calls.append(locale)
        if self.delay:
            time.sleep(self.delay)
        return self.bundles.get(locale, {})


class TestMergeBundle:
    def test_writes_namespace_per_locale(self):
        table = {"en": {}, "nl": {}}
        merge_bundle(table, {"shared": {"en": {"a": "A"}, "nl": {"a": "B"}}}, ["en", "nl"])
        assert table == {"en": {"shared": {"a": "A"}}, "nl": {"shared": {"a": "B"}}}

    def test_last_write_wins(self):
        table = {"en": {}}
        merge_bundle(table, {"shared": {"en": {"a": "first", "b": "only first"}}}, ["en"])
        merge_bundle(table, {"shared": {"en": {"a": "second"}}}, ["en"])
        # whole namespace replaced, no deep merge
        assert table["en"]["shared"] == {"a": "second"}

    def test_absent_locale_left_untouched(self):
        table = {"en": {"shared": {"a": "A"}}, "nl": {}}
        merge_bundle(table, {"shared": {"nl": {"a": "B"}}}, ["en", "nl"])
        assert table["en"]["shared"] == {"a": "A"}
        assert table["nl"]["shared"] == {"a": "B"}

    def test_unconfigured_locale_ignored(self):
        table = {"en": {}}
        merge_bundle(table, {"shared": {"en": {}, "fr": {"a": "A"}}}, ["en"])
        assert "fr" not in table


class TestLookup:
    def test_nested(self):
        assert lookup({"a": {"b": {"c": "leaf"}}}, "a.b.c") == "leaf"

    def test_miss(self):
        assert lookup({"a": {"b": "leaf"}}, "a.x") is None

    def test_through_leaf(self):
        assert lookup({"a": "leaf"}, "a.b") is None

    def test_none_subtree(self):
        assert lookup(None, "a") is None

    def test_returns_subtree_for_namespace(self):
        assert lookup({"a": {"b": "leaf"}}, "a") == {"b": "leaf"}


class TestEnsureLoaded:
    def test_builds_table_for_all_locales(self, store):
        table = store.ensure_loaded()
        assert set(table) == {"en", "nl"}
        assert table["en"]["shared"]["next"] == "Next"
        assert table["nl"]["shared"]["next"] == "Volgende"

    def test_missing_namespace_is_absent(self, store):
        table = store.ensure_loaded()
        assert "chapter_one" not in table["nl"]

    def test_idempotent(self, source):
        once = TranslationStore(source, ["en", "nl"], "en").ensure_loaded()
        store = TranslationStore(source, ["en", "nl"], "en")
        store.ensure_loaded()
        twice = store.ensure_loaded()
        assert twice == once

    def test_source_read_once(self):
        source = CountingSource({"en": {"shared": {"en": {"a": "A"}}}})
        store = TranslationStore(source, ["en", "nl"], "en")
        store.ensure_loaded()
        store.ensure_loaded()
        assert source.calls == ["en", "nl"]

    def test_empty_build_is_retried(self):
        source = CountingSource({})
        store = TranslationStore(source, ["en"], "en")
        assert not any(store.ensure_loaded().values())
        assert not store.is_loaded
        source.bundles = {"en": {"shared": {"en": {"a": "A"}}}}
        assert store.ensure_loaded()["en"]["shared"] == {"a": "A"}
        assert source.calls == ["en", "en"]

    def test_later_source_wins(self):
        source = StaticBundleSource(
            {
                "en": {"shared": {"en": {"a": "from en source"}}},
                "nl": {"shared": {"en": {"a": "from nl source"}, "nl": {"a": "nl"}}},
            }
        )
        table = TranslationStore(source, ["en", "nl"], "en").ensure_loaded()
        assert table["en"]["shared"] == {"a": "from nl source"}

    def test_concurrent_first_access_merges_once(self):
        source = CountingSource({"en": {"shared": {"en": {"a": "A"}}}}, delay=0.05)
        store = TranslationStore(source, ["en"], "en")
        results = []
        threads = [
            threading.Thread(target=lambda: results.append(store.ensure_loaded())) for _ in range(8)
        ]
        for th in threads:
            th.start()
        for th in threads:
            th.join()
        assert source.calls == ["en"]
        assert all(r is results[0] for r in results)

    def test_table_unchanged_after_reads(self, store, translator):
        built = copy.deepcopy(store.ensure_loaded())
        translator.t("shared.link", "nl")
        translator.t("chapter_one.intro.tip", "en")
        translator.flatten("nl")
        store.lookup("en", "shared.next")
        assert store.ensure_loaded() == built

    def test_no_public_mutators(self, store):
        public = {name for name in dir(store) if not name.startswith("_")}
        assert public == {"default_locale", "ensure_loaded", "is_loaded", "locales", "lookup", "source"}

    def test_empty_build_rereads_source_on_next_lookup(self):
        source = CountingSource({})
        store = TranslationStore(source, ["en"], "en")
        assert store.lookup("en", "shared.a") is None
        source.bundles = {"en": {"shared": {"en": {"a": "A"}}}}
        assert store.lookup("en", "shared.a") == "A"
        assert "shared" in store.ensure_loaded()["en"]
