import reflex as rx

from rxselect.playground.stories_registry import STORIES

_SIDEBAR = [{"id": story["id"], "name": story["name"]} for story in STORIES]


class StoryState(rx.State):
    story_id: str = _SIDEBAR[0]["id"]

    def select(self, sid: str):
        self.story_id = sid


def _sidebar_item(item):
    is_active = item["id"] == StoryState.story_id
    return rx.box(
        rx.hstack(
            rx.text(
                item["name"],
                weight="medium",
                color=rx.cond(is_active, "#0f172a", "#334155"),
            ),
            align="center",
            padding="8px 10px",
        ),
        background=rx.cond(is_active, "#eef2ff", "transparent"),
        border_radius="8px",
        cursor="pointer",
        on_click=lambda _id=item["id"]: StoryState.select(_id),
    )


def _sidebar():
    return rx.box(
        rx.vstack(
            rx.hstack(rx.text("Components", weight="bold"), align="center", padding="6px 8px"),
            rx.vstack(
                *[_sidebar_item(it) for it in _SIDEBAR],
                spacing="1",
            ),
            spacing="2",
            width="100%",
        ),
        position="sticky",
        top="0",
        padding="0.75rem",
        border_right="1px solid #e2e8f0",
        min_width="240px",
        height="100%",
    )


def _pick(part: str):
    """Nest one `rx.cond` per story so only the selected story's `part` is shown."""
    picked = STORIES[-1][part]()
    for story in reversed(STORIES[:-1]):
        picked = rx.cond(StoryState.story_id == story["id"], story[part](), picked)
    return picked


def _panel(title: str, body):
    return rx.box(
        rx.vstack(
            rx.text(title, weight="bold"),
            body,
            spacing="3",
            width="100%",
        ),
        padding="1rem",
        border="1px solid #e2e8f0",
        border_radius="12px",
        background="#fff",
        width="100%",
    )


def storybook_page() -> rx.Component:
    return rx.hstack(
        _sidebar(),
        rx.vstack(
            rx.hstack(
                _panel("Preview", _pick("preview")),
                _panel("Controls", _pick("controls")),
                spacing="4",
                align="start",
                width="100%",
            ),
            _pick("code"),
            spacing="4",
            padding="1rem",
            width="100%",
        ),
        align="start",
        min_height="100vh",
        width="100%",
    )
