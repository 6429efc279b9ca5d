"""i18n state — locale selection and reactive translations dict."""

import reflex as rx

from lessonlab.i18n import DEFAULT_LOCALE, SUPPORTED_LOCALES, get_translations


class I18nState(rx.State):
    locale: str = DEFAULT_LOCALE
    translations: dict[str, str] = get_translations(DEFAULT_LOCALE)

    def set_locale(self, locale: str):
        if locale not in SUPPORTED_LOCALES:
            return
        self.locale = locale
        self.translations = get_translations(locale)
