from django.apps import AppConfig


class CoreConfig(AppConfig):
    name = "core"

    def ready(self) -> None:
        from core.container import get_container

        # Seed keys are registered at startup, not on the first request.
        get_container()
