from .config import Config, Location, catalog_from_json, cfg
from .metrics import derive_metrics
from .store import StaffingStore

__all__ = [
    "Config",
    "Location",
    "cfg",
    "catalog_from_json",
    "derive_metrics",
    "StaffingStore",
]
