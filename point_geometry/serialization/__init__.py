"""
Point Serialization

Field records and the versioned YAML point archive.
"""

from .records import POINT_TYPES, field_names, to_record, from_record, type_name, resolve_type
from .archive import PointArchive

__all__ = [
    'POINT_TYPES', 'field_names', 'to_record', 'from_record', 'type_name', 'resolve_type',
    'PointArchive',
]
