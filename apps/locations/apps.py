"""
Location Tracker Application Configuration
"""
from django.apps import AppConfig
from django.conf import settings


class LocationsConfig(AppConfig):
    default_auto_field = 'django.db.models.AutoField'
    name = 'apps.locations'
    label = 'locations'
    verbose_name = 'Location Tracker'

    def ready(self):
        from .store import LocationStore, StoreConfig

        # One store per process; views reach it through store.get_store()
        self.store = LocationStore(StoreConfig(alias=getattr(settings, 'LOCATIONS_DB_ALIAS', 'default')))
