from django.apps import AppConfig


class MessageFilesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'messagefiles'
    verbose_name = 'Message Files'

    def ready(self):  # type: ignore[override]
        # Initial load of locale property files
        from .loader import get_loader

        get_loader().on_start()
