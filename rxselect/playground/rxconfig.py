import reflex as rx


class PlaygroundConfig(rx.Config):
    pass


config = PlaygroundConfig(
    app_name="app",
    env=rx.Env.DEV,
)
