from django.apps import AppConfig


class RentalsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'rentals'
    verbose_name = 'DreamHome rentals'

    def ready(self):
        # Registers the lease -> client status handler
        from . import signals  # noqa: F401
