"""i18n: locale bundles, dotted-key lookup with default-locale fallback, rich text."""

from lessonlab.config import settings
from lessonlab.i18n.fragments import Fragment, LinkNode, TagKind, Text, TooltipNode
from lessonlab.i18n.store import TranslationStore
from lessonlab.i18n.translate import Translation, Translator, default_translator

SUPPORTED_LOCALES = settings.supported_locales
DEFAULT_LOCALE = settings.default_locale


def t(key: str | None, locale: str) -> Translation:
    """Translate *key* into *locale* with the process-wide translator."""
    return default_translator().t(key, locale)


def get_translations(locale: str) -> dict[str, str]:
    """Return merged raw strings: default locale base + target locale overrides."""
    return default_translator().flatten(locale)


__all__ = [
    "DEFAULT_LOCALE",
    "SUPPORTED_LOCALES",
    "Fragment",
    "LinkNode",
    "TagKind",
    "Text",
    "TooltipNode",
    "Translation",
    "TranslationStore",
    "Translator",
    "default_translator",
    "get_translations",
    "t",
]
