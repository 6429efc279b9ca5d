"""Locale store: merged translation table, built lazily on first access."""

import logging
import threading
from collections.abc import Iterable, Mapping
from typing import Any

from lessonlab.i18n.sources import Bundle, BundleSource

_log = logging.getLogger(__name__)

Table = dict[str, dict[str, Any]]


def merge_bundle(table: Table, bundle: Bundle, locales: Iterable[str]) -> None:
    """Write each namespace of *bundle* into *table* for every locale in *locales*.

    Later writes replace earlier ones at the same (locale, namespace); the
    namespace content is replaced whole, never deep-merged. A locale the
    bundle has no content for is left untouched.
    """
    for namespace, per_locale in bundle.items():
        for locale in locales:
            if locale in per_locale:
                table.setdefault(locale, {})[namespace] = per_locale[locale]


def lookup(subtree: Mapping[str, Any] | None, key: str) -> Any:
    """Nested lookup of dotted *key* in *subtree*. Returns ``None`` on a miss."""
    node: Any = subtree
    for part in key.split("."):
        if not isinstance(node, Mapping) or part not in node:
            return None
        node = node[part]
    return node


class TranslationStore:
    """Owns the merged translation table for a set of locales.

    The table is built on the first :meth:`ensure_loaded` call and reused
    afterwards. A build that produced no content leaves the store unloaded,
    so the next access tries again.
    """

    def __init__(self, source: BundleSource, locales: Iterable[str], default_locale: str):
        self.source = source
        self.locales = list(locales)
        self.default_locale = default_locale
        self._table: Table = {}
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        return any(self._table.values())

    def ensure_loaded(self) -> Table:
        """Return the merged table, building it first if it is empty."""
        if self.is_loaded:
            return self._table

        with self._lock:
            if self.is_loaded:
                return self._table
            self._table = self._build()
            return self._table

    def _build(self) -> Table:
        table: Table = {locale: {} for locale in self.locales}
        for locale in self.locales:
            merge_bundle(table, self.source(locale), self.locales)
        _log.info(
            "Loaded translations: %s",
            ", ".join(f"{locale}={len(table[locale])}" for locale in self.locales),
        )
        return table

    def lookup(self, locale: str, key: str) -> Any:
        """Raw value at *key* in *locale*'s subtree, or ``None``."""
        return lookup(self.ensure_loaded().get(locale), key)
