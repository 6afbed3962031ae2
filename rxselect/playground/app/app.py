import reflex as rx

from rxselect.playground.storybook import storybook_page


def index() -> rx.Component:
    """Simple landing page with a link to the storybook."""
    return rx.center(
        rx.vstack(
            rx.heading("rxselect"),
            rx.text("Selection list & playground"),
            rx.link("Open Storybook", href="/storybook"),
            spacing="4",
            align="center",
        ),
        min_height="100vh",
        padding="2rem",
    )


# ---- App ----
app = rx.App()
app.add_page(index, route="/", title="rxselect")
app.add_page(storybook_page, route="/storybook", title="rxselect — Storybook")
