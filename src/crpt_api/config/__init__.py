from .settings import AppConfig
from .time_units import interval_from_unit
from .urls import CREATE_DOCUMENT_URL

__all__ = ["AppConfig", "CREATE_DOCUMENT_URL", "interval_from_unit"]
