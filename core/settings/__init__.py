# Settings package
from core.settings.app import AppSettings, get_app_settings
from core.settings.sections.api import ApiSettings
from core.settings.sections.database import DatabaseSettings

__all__ = ["get_app_settings", "AppSettings", "ApiSettings", "DatabaseSettings"]
