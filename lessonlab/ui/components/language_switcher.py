"""Compact language switcher for lesson pages."""

import reflex as rx

from lessonlab.i18n import SUPPORTED_LOCALES
from lessonlab.ui.state.i18n_state import I18nState


def language_switcher() -> rx.Component:
    return rx.select(
        SUPPORTED_LOCALES,
        value=I18nState.locale,
        on_change=I18nState.set_locale,
        size="1",
    )
