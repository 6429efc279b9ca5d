"""Bundle source providers.

A bundle source is any callable taking a locale code and returning that
locale's bundle: a mapping of namespace to a mapping of locale to content.
"""

import json
import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

_log = logging.getLogger(__name__)

Bundle = Mapping[str, Mapping[str, Any]]
BundleSource = Callable[[str], Bundle]

PACKAGED_LOCALES_DIR = Path(__file__).parent / "locales"


class JsonBundleSource:
    """Read ``<root>/<locale>/<namespace>.json`` files.

    Each file holds one namespace's content for one locale. The file stem is
    the namespace name.
    """

    def __init__(self, root: Path | str = PACKAGED_LOCALES_DIR):
        self.root = Path(root)

    def __call__(self, locale: str) -> dict[str, dict[str, Any]]:
        locale_dir = self.root / locale
        if not locale_dir.is_dir():
            _log.warning("No translation bundles for locale %r in %s", locale, self.root)
            return {}

        bundle: dict[str, dict[str, Any]] = {}
        for path in sorted(locale_dir.glob("*.json")):
            with open(path, encoding="utf-8") as f:
                bundle[path.stem] = {locale: json.load(f)}
        _log.debug("Read %d namespaces for %s from %s", len(bundle), locale, locale_dir)
        return bundle


class StaticBundleSource:
    """Serve bundles held in memory, keyed by locale code."""

    def __init__(self, bundles: Mapping[str, Bundle]):
        self.bundles = bundles

    def __call__(self, locale: str) -> Bundle:
        return self.bundles.get(locale, {})
