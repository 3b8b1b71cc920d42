from django.apps import AppConfig


class CoreConfig(AppConfig):
    name = 'apps.core'
    label = 'core'

    def ready(self):
        # Connect the CORS origin receiver
        from . import signals  # noqa: F401
