from django.apps import AppConfig


class BindAdminConfig(AppConfig):
    name = 'bindadmin'
    verbose_name = 'BIND zones'

    def ready(self):
        from bindadmin import signals  # noqa: F401
