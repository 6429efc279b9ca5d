"""Translation preview page — renders packaged lesson copy in the active locale."""

import reflex as rx

from lessonlab.ui.components.language_switcher import language_switcher
from lessonlab.ui.components.rich_text import rich_text
from lessonlab.ui.state.i18n_state import I18nState

_t = I18nState.translations

PREVIEW_KEYS = [
    "chapter_four.public_key_three.paragraph_one",
    "chapter_four.public_key_three.paragraph_two",
    "chapter_five.derive_message_two.paragraph_one",
    "chapter_five.derive_message_two.paragraph_two",
    "shared.more_info",
]


def preview_page() -> rx.Component:
    return rx.container(
        rx.vstack(
            rx.hstack(
                rx.heading(_t["chapter_four.public_key_three.heading"], size="6"),
                rx.spacer(),
                rx.text(_t["shared.language"], size="2", color="gray"),
                language_switcher(),
                width="100%",
                align="center",
            ),
            *[rich_text(key, size="4") for key in PREVIEW_KEYS],
            rx.button(_t["shared.next"], size="3"),
            spacing="5",
            padding_y="32px",
        ),
    )
