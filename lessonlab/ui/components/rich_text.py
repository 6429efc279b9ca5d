"""Render resolved translations (plain strings or fragment lists) with Reflex."""

import reflex as rx

from lessonlab.i18n import DEFAULT_LOCALE, SUPPORTED_LOCALES, default_translator
from lessonlab.i18n.fragments import LinkNode, TooltipNode
from lessonlab.i18n.translate import Translation
from lessonlab.ui.state.i18n_state import I18nState


def render_fragment(fragment) -> rx.Component:
    if isinstance(fragment, LinkNode):
        return rx.link(
            fragment.label,
            href=fragment.href or "#",
            class_name=fragment.class_name,
            is_external=fragment.target == "_blank",
        )
    if isinstance(fragment, TooltipNode):
        return rx.tooltip(
            rx.text.span(fragment.label, class_name=fragment.class_name),
            content=fragment.content,
        )
    return rx.text.span(str(fragment))


def render_translation(value: Translation) -> rx.Component:
    """Turn the result of ``Translator.t`` into a component.

    A missing translation renders as an empty fragment.
    """
    if value is None:
        return rx.fragment()
    if isinstance(value, str):
        return rx.text.span(value)
    return rx.fragment(*[render_fragment(f) for f in value if f != ""])


def rich_text(key: str, **props) -> rx.Component:
    """Text for *key* that follows ``I18nState.locale``.

    Every supported locale is resolved up front and switched on the client,
    since links and tooltips cannot live in the flat translations dict.
    """
    translator = default_translator()
    return rx.text(
        rx.match(
            I18nState.locale,
            *[(locale, render_translation(translator.t(key, locale))) for locale in SUPPORTED_LOCALES],
            render_translation(translator.t(key, DEFAULT_LOCALE)),
        ),
        **props,
    )
