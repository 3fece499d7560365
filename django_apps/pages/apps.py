from django.apps import AppConfig


class PagesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "django_apps.pages"
    verbose_name = "Deck pages"
