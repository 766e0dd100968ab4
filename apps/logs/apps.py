from django.apps import AppConfig


class LogsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.logs"
    verbose_name = "Logs"

    def ready(self):
        from .handlers import register_handlers

        register_handlers()
