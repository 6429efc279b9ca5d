"""Translation lookup with default-locale fallback and rich-text interpolation."""

import functools
import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from lessonlab.i18n.fragments import Fragment, LinkNode, TagKind, Text, TooltipNode
from lessonlab.i18n.markup import TagMatch, has_markup, next_tag
from lessonlab.i18n.store import TranslationStore, lookup

_log = logging.getLogger(__name__)

CURSOR_CLASS = "cursor-pointer"

Translation = str | list[Fragment] | None


def _with_cursor(class_name: str | None) -> str:
    return f"{class_name} {CURSOR_CLASS}" if class_name else CURSOR_CLASS


def _flatten_into(result: dict[str, str], node: Any, prefix: str) -> None:
    if isinstance(node, str):
        result[prefix] = node
    elif isinstance(node, Mapping):
        for name, child in node.items():
            _flatten_into(result, child, f"{prefix}.{name}" if prefix else name)


class Translator:
    """Resolve dotted keys against a :class:`TranslationStore`.

    Content problems never raise: an empty key yields ``missing_key_text``,
    a missing translation falls back to the default locale (then ``None``),
    and malformed markup is left as literal text.
    """

    def __init__(self, store: TranslationStore, missing_key_text: str = "{missing_translation_key}"):
        self.store = store
        self.missing_key_text = missing_key_text

    @property
    def default_locale(self) -> str:
        return self.store.default_locale

    def t(self, key: str | None, locale: str) -> Translation:
        """Translate *key* into *locale*.

        Returns the raw string when it has no markup, a flat fragment list
        when it does, or ``None`` when neither *locale* nor the default
        locale has the key.
        """
        table = self.store.ensure_loaded()

        if not key:
            return self.missing_key_text

        translation = lookup(table.get(locale), key)
        if not isinstance(translation, str) or not translation:
            fallback = lookup(table.get(self.default_locale), key)
            if not isinstance(fallback, str):
                _log.debug("Missing translation %r for %s and %s", key, locale, self.default_locale)
                return None
            if locale != self.default_locale:
                _log.debug("Missing translation %r for %s, using %s", key, locale, self.default_locale)
            return fallback

        if not has_markup(translation):
            return translation

        fragments = self.inject([Text(translation)], TagKind.LINK, locale)
        return self.inject(fragments, TagKind.TOOLTIP, locale)

    __call__ = t

    def inject(self, fragments: Iterable[Fragment | str], kind: TagKind, locale: str) -> list[Fragment]:
        """Expand every *kind* tag found in the text elements of *fragments*.

        Nodes pass through untouched. Plain ``str`` elements are tagged as
        :class:`Text`. A text element without matches is kept as is;
        otherwise it is replaced in place by the text before each match,
        one node per match and the trailing text.
        """
        result: list[Fragment] = []
        for part in fragments:
            if not isinstance(part, str):
                result.append(part)
                continue
            if not isinstance(part, Text):
                part = Text(part)

            parts: list[Fragment] = []
            pos = 0
            while (match := next_tag(part, kind, pos)) is not None:
                parts.append(Text(part[pos : match.start]))
                parts.append(self._node(match, locale))
                pos = match.end

            if not parts:
                result.append(part)
                continue
            parts.append(Text(part[pos:]))
            result.extend(parts)
        return result

    def _node(self, match: TagMatch, locale: str) -> LinkNode | TooltipNode:
        attrs = match.attributes()
        if match.kind is TagKind.LINK:
            return LinkNode(
                label=attrs.label,
                href=attrs.href,
                class_name=_with_cursor(attrs.class_name),
            )

        content_key = attrs.content or ""
        content = lookup(self.store.ensure_loaded().get(locale), content_key) if content_key else None
        return TooltipNode(
            label=attrs.label,
            content=content if isinstance(content, str) and content else content_key,
            content_key=content_key,
            href=attrs.href,
            class_name=_with_cursor(attrs.class_name),
        )

    def bind(self, locale: str) -> Callable[[str | None], Translation]:
        """Return a one-argument translate function fixed to *locale*."""

        def translate(key: str | None) -> Translation:
            return self.t(key, locale)

        return translate

    def flatten(self, locale: str) -> dict[str, str]:
        """Return ``{dotted_key: raw_string}`` for *locale*.

        The default locale is the base and *locale* overrides it, so every
        default-locale key is present. Unsupported locales get the default
        locale alone.
        """
        table = self.store.ensure_loaded()
        merged: dict[str, str] = {}
        _flatten_into(merged, table.get(self.default_locale, {}), "")
        if locale != self.default_locale and locale in self.store.locales:
            target: dict[str, str] = {}
            _flatten_into(target, table.get(locale, {}), "")
            merged.update({key: value for key, value in target.items() if value})
        return merged


@functools.cache
def default_translator() -> Translator:
    """Process-wide translator built from settings and the configured bundles."""
    from lessonlab.config import settings
    from lessonlab.i18n.sources import PACKAGED_LOCALES_DIR, JsonBundleSource

    store = TranslationStore(
        JsonBundleSource(settings.locales_dir or PACKAGED_LOCALES_DIR),
        settings.supported_locales,
        settings.default_locale,
    )
    return Translator(store, missing_key_text=settings.missing_key_text)
