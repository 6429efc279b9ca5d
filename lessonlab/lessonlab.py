import reflex as rx

from lessonlab.ui.pages.preview import preview_page

app = rx.App()

app.add_page(
    preview_page,
    route="/",
    title="Translation Preview | Lessonlab",
)
