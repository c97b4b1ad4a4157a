from django.apps import AppConfig

class PlansConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.plans'  # Ważne: pełna ścieżka z 'apps.'
    label = 'plans'

    def ready(self):
        import apps.plans.signals
