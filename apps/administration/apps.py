from django.apps import AppConfig  # type: ignore


class AdministrationConfig(AppConfig):
    name = "apps.administration"
    label = "administration"
    verbose_name = "Administration"

    def ready(self) -> None:
        from . import schema  # noqa: F401
