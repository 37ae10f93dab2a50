from .fields import FIELD_SPECS, FieldSpec, lookup_field
from .record import BuoyRecord

__all__ = [
    "FIELD_SPECS",
    "FieldSpec",
    "lookup_field",
    "BuoyRecord",
]
