# Service layer: in-memory registry state and request parsing

from resident_api.services.resident_registry import ResidentRegistry
from resident_api.services.validation import parse_resident_create

__all__ = ["ResidentRegistry", "parse_resident_create"]
