# core/settings/app.py
from functools import lru_cache

from core.settings.sections.api import ApiSettings
from core.settings.sections.database import DatabaseSettings


class AppSettings:
    """
    Settings for the order service, one attribute per section:

    - api:      HTTP surface and logging (API_*)
    - database: connection URL and pool sizing (DB_*)

    Sections are read from the environment when AppSettings is built,
    not at import time.
    """

    def __init__(self):
        self.api = ApiSettings()
        self.database = DatabaseSettings()


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached settings; call get_app_settings.cache_clear() to reload."""
    return AppSettings()
